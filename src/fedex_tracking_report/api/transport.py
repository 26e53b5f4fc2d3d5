from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


class Transport(Protocol):
    def post(self, url: str, *, headers: Optional[Dict[str, str]] = None, data: Any = None, json: Any = None) -> requests.Response:
        ...


class RequestsTransport:
    """Requests session wrapper.

    Retries are off by default: every upstream failure is fatal to the run.
    A positive `max_retries` enables urllib3 backoff on connection errors and
    on 429/5xx responses.
    """

    def __init__(self, timeout: int = 30, max_retries: int = 0, backoff_factor: float = 0.3) -> None:
        self.session = requests.Session()
        self.timeout = timeout

        retry = Retry(
            total=max_retries,
            read=max_retries,
            connect=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("POST",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def post(self, url: str, *, headers: Optional[Dict[str, str]] = None, data: Any = None, json: Any = None) -> requests.Response:
        return self.session.post(url, headers=headers, data=data, json=json, timeout=self.timeout)
