from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EnvCfg:
    """Minimal shape we need from get_app_env()."""
    FEDEX_CLIENT_ID: str = ""
    FEDEX_CLIENT_SECRET: str = ""
    FEDEX_TOKEN_URL: Optional[str] = None
    FEDEX_TRACKING_URL: Optional[str] = None
