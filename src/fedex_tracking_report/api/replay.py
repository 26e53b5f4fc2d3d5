from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

REPLAY_TOKEN = "replay-token"


def make_response(body: Any, status_code: int = 200, url: str = "") -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json"
    resp._content = json.dumps(body).encode("utf-8")
    return resp


@dataclass
class ReplayTransport:
    """Serves recorded FedEx response bodies in place of the network.

    `path` is a JSON file holding one response body or a list of them (the
    format ApiBodyWriter produces). The token endpoint always answers with
    REPLAY_TOKEN; a tracking POST answers with the recorded results for the
    requested numbers, in request order, omitting numbers never recorded.
    """

    path: Path
    requests_seen: List[Dict[str, Any]] = field(default_factory=list)
    _index: Dict[str, Any] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        if not self.path.is_file():
            raise FileNotFoundError(self.path)

        raw = json.loads(self.path.read_text(encoding="utf-8"))
        for body in raw if isinstance(raw, list) else [raw]:
            if not isinstance(body, dict):
                continue
            output = body.get("output") or {}
            for item in output.get("completeTrackResults") or []:
                tn = item.get("trackingNumber") if isinstance(item, dict) else None
                if tn:
                    self._index[str(tn)] = item

    def tracking_numbers(self) -> List[str]:
        return list(self._index)

    def post(self, url: str, *, headers: Optional[Dict[str, str]] = None, data: Any = None, json: Any = None) -> requests.Response:
        if json is None:
            self.requests_seen.append({"url": url, "data": data})
            return make_response({"access_token": REPLAY_TOKEN,
                                  "token_type": "bearer"}, url=url)

        self.requests_seen.append({"url": url, "json": json})
        requested = [
            info["trackingNumberInfo"]["trackingNumber"]
            for info in json.get("trackingInfo", [])
        ]
        results = [self._index[tn] for tn in requested if tn in self._index]
        return make_response({"output": {"completeTrackResults": results}}, url=url)
