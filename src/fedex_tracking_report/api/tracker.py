from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests

from fedex_tracking_report.config.logging_config import truncate_body
from fedex_tracking_report.errors import SchemaValidationError, TrackingRequestError
from fedex_tracking_report.models import CarrierConfig, CompleteTrackResult

from .body_writer import ApiBodyWriter
from .schema import ParseFailure, parse_tracking_response
from .transport import RequestsTransport, Transport

# Upstream limit on tracking numbers per request
MAX_BATCH_SIZE = 30


def chunked(items: Sequence[str], size: int = MAX_BATCH_SIZE) -> List[List[str]]:
    """Split into consecutive chunks of at most `size`, preserving order."""
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def build_request_body(chunk: Sequence[str]) -> Dict[str, Any]:
    return {
        "trackingInfo": [
            {"trackingNumberInfo": {"trackingNumber": tn}} for tn in chunk
        ],
        "includeDetailedScans": True,
    }


class BatchTracker:
    """Tracks numbers in chunks of MAX_BATCH_SIZE, one request at a time.

    Responses are validated into CompleteTrackResult models and merged into a
    single mapping keyed by tracking number; a later chunk overwrites an
    earlier entry for the same number. Any request or validation failure
    aborts the whole call.
    """

    def __init__(
        self,
        config: CarrierConfig,
        transport: Optional[Transport] = None,
        *,
        logger: Optional[logging.Logger] = None,
        body_writer: Optional[ApiBodyWriter] = None,
        chunk_size: int = MAX_BATCH_SIZE,
    ) -> None:
        self.config = config
        self.transport = transport or RequestsTransport()
        self.logger = logger or logging.getLogger(
            "fedex_tracking_report.api.tracker")
        self.body_writer = body_writer
        self.chunk_size = chunk_size
        self.batches_sent = 0

    def track(self, tracking_numbers: Sequence[str], token: str) -> Dict[str, CompleteTrackResult]:
        results: Dict[str, CompleteTrackResult] = {}
        chunks = chunked(tracking_numbers, self.chunk_size)
        for n, chunk in enumerate(chunks, start=1):
            self.logger.info("Tracking batch %d/%d (%d numbers)",
                             n, len(chunks), len(chunk))
            for record in self._track_chunk(chunk, token):
                results[record.tracking_number] = record
        return results

    def _track_chunk(self, chunk: Sequence[str], token: str) -> List[CompleteTrackResult]:
        payload = self._post(build_request_body(chunk), token)

        if self.body_writer is not None:
            self.body_writer.add_response(payload)

        parsed = parse_tracking_response(payload)
        if isinstance(parsed, ParseFailure):
            self.logger.error(
                "Tracking response failed validation: response_body=%s",
                truncate_body(json.dumps(payload, ensure_ascii=False)))
            raise SchemaValidationError(
                "Tracking response does not match the expected schema",
                parsed.issues,
            )
        return parsed.value

    def _post(self, body: Dict[str, Any], token: str) -> Any:
        headers = {"Authorization": f"Bearer {token}",
                   "Content-Type": "application/json"}
        endpoint = self.config.tracking_url
        self.logger.debug("FedEx POST endpoint=%s request_body=%s", endpoint,
                          truncate_body(json.dumps(body, ensure_ascii=False)))

        try:
            resp = self.transport.post(endpoint, headers=headers, json=body)
        except requests.RequestException as ex:
            raise TrackingRequestError(
                f"Tracking request to {endpoint} failed: {ex}") from ex
        self.batches_sent += 1

        try:
            resp.raise_for_status()
        except requests.HTTPError as ex:
            self.logger.error(
                "FedEx POST endpoint=%s returned status=%s response_body=%s",
                endpoint, resp.status_code, truncate_body(resp.text))
            raise TrackingRequestError(
                f"Tracking request returned HTTP {resp.status_code}") from ex

        try:
            payload = resp.json()
        except ValueError as ex:
            raise TrackingRequestError(
                "Tracking response is not JSON") from ex

        self.logger.debug("FedEx POST endpoint=%s status=%s response_body=%s",
                          endpoint, resp.status_code,
                          truncate_body(resp.text))
        return payload
