from __future__ import annotations

from dataclasses import dataclass

from .env_cfg import EnvCfg

DEFAULT_TOKEN_URL = "https://apis.fedex.com/oauth/token"
DEFAULT_TRACKING_URL = "https://apis.fedex.com/track/v1/trackingnumbers"


@dataclass(frozen=True)
class CarrierConfig:
    """Credentials and endpoints handed to the Authenticator and BatchTracker."""

    client_id: str
    client_secret: str
    token_url: str = DEFAULT_TOKEN_URL
    tracking_url: str = DEFAULT_TRACKING_URL

    @classmethod
    def from_env(cls, env_cfg: EnvCfg) -> "CarrierConfig":
        return cls(
            client_id=env_cfg.FEDEX_CLIENT_ID,
            client_secret=env_cfg.FEDEX_CLIENT_SECRET,
            token_url=env_cfg.FEDEX_TOKEN_URL or DEFAULT_TOKEN_URL,
            tracking_url=env_cfg.FEDEX_TRACKING_URL or DEFAULT_TRACKING_URL,
        )
