from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from fedex_tracking_report.api.replay import make_response
from fedex_tracking_report.models import CarrierConfig

TOKEN_URL = "https://fedex.test/oauth/token"
TRACKING_URL = "https://fedex.test/track/v1/trackingnumbers"


def _track_result(
    tn: str,
    *,
    status: str = "Delivered",
    code: str = "DL",
    ship: Optional[str] = "2024-01-05T09:00:00Z",
    delivered: Optional[str] = "2024-01-10T00:00:00Z",
    transit_end: Optional[str] = "2024-01-08T00:00:00Z",
    service: Optional[str] = "FedEx Ground",
    weight: Optional[dict] = None,
    dims: Optional[dict] = None,
) -> Dict[str, Any]:
    """One completeTrackResults element shaped like the FedEx Track API."""
    tr: Dict[str, Any] = {
        "latestStatusDetail": {
            "code": code,
            "derivedCode": code,
            "statusByLocale": status,
            "description": status,
        },
        "scanEvents": [
            {"date": "2024-01-05T09:00:00Z", "eventType": "PU",
             "derivedStatusCode": "PU"},
        ],
    }
    dates = []
    if ship:
        dates.append({"type": "SHIP", "dateTime": ship})
    if delivered:
        dates.append({"type": "ACTUAL_DELIVERY", "dateTime": delivered})
    tr["dateAndTimes"] = dates
    if transit_end:
        tr["standardTransitTimeWindow"] = {"window": {"ends": transit_end}}
    if service:
        tr["serviceDetail"] = {"type": "FEDEX_GROUND", "description": service,
                               "shortDescription": "FG"}
    if weight or dims:
        tr["packageDetails"] = {"weightAndDimensions": {
            "weight": [weight] if weight else [],
            "dimensions": [dims] if dims else [],
        }}
    return {"trackingNumber": tn, "trackResults": [tr]}


def _tracking_body(*results: Dict[str, Any]) -> Dict[str, Any]:
    return {"transactionId": "t-1", "output": {"completeTrackResults": list(results)}}


class FakeTransport:
    """Records every POST; answers via `handler(url, data, json)`."""

    def __init__(self, handler: Callable[..., requests.Response]) -> None:
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, *, headers=None, data=None, json=None):
        self.calls.append({"url": url, "headers": headers,
                           "data": data, "json": json})
        return self.handler(url, data, json)

    def tracking_calls(self) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["url"] == TRACKING_URL]


def _echo(url, data, json):
    if url == TOKEN_URL:
        return make_response({"access_token": "tok-123", "expires_in": 3600})
    tns = [i["trackingNumberInfo"]["trackingNumber"] for i in json["trackingInfo"]]
    return make_response(_tracking_body(*(_track_result(tn) for tn in tns)))


@pytest.fixture
def carrier_cfg() -> CarrierConfig:
    return CarrierConfig(
        client_id="cid",
        client_secret="secret",
        token_url=TOKEN_URL,
        tracking_url=TRACKING_URL,
    )


@pytest.fixture
def track_result() -> Callable[..., Dict[str, Any]]:
    return _track_result


@pytest.fixture
def tracking_body() -> Callable[..., Dict[str, Any]]:
    return _tracking_body


@pytest.fixture
def fake_transport() -> Callable[..., FakeTransport]:
    """Factory: `fake_transport(handler)` builds a recording transport."""
    return FakeTransport


@pytest.fixture
def echo_handler() -> Callable[..., requests.Response]:
    """Token endpoint returns a token; tracking returns a valid result per number."""
    return _echo


@pytest.fixture
def echo_transport() -> FakeTransport:
    return FakeTransport(_echo)
