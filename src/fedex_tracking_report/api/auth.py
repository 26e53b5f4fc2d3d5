from __future__ import annotations

import logging
from typing import Optional

import requests

from fedex_tracking_report.config.logging_config import truncate_body
from fedex_tracking_report.errors import AuthenticationError
from fedex_tracking_report.models import CarrierConfig

from .transport import RequestsTransport, Transport


class Authenticator:
    """Exchanges client credentials for a FedEx bearer token.

    One form-encoded POST per call; the token is neither cached nor refreshed.
    Every failure raises AuthenticationError.
    """

    def __init__(
        self,
        config: CarrierConfig,
        transport: Optional[Transport] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.transport = transport or RequestsTransport()
        self.logger = logger or logging.getLogger(
            "fedex_tracking_report.api.auth")

    def fetch_token(self) -> str:
        data = {
            "grant_type": "client_credentials",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        self.logger.debug("Requesting FedEx OAuth token from %s",
                          self.config.token_url)

        try:
            resp = self.transport.post(
                self.config.token_url, headers=headers, data=data)
        except requests.RequestException as ex:
            raise AuthenticationError(f"Token request failed: {ex}") from ex

        try:
            resp.raise_for_status()
        except requests.HTTPError as ex:
            self.logger.error(
                "Token request returned status=%s response_body=%s",
                resp.status_code, truncate_body(resp.text))
            raise AuthenticationError(
                f"Token request returned HTTP {resp.status_code}") from ex

        try:
            body = resp.json()
        except ValueError as ex:
            raise AuthenticationError("Token response is not JSON") from ex

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthenticationError("Token response has no access_token")

        self.logger.debug("FedEx token acquired (expires_in=%s)",
                          body.get("expires_in"))
        return token
