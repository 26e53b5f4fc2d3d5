from __future__ import annotations

import datetime as dt
from collections import Counter
from pathlib import Path
from typing import Any, Mapping, Optional

from fedex_tracking_report.api.auth import Authenticator
from fedex_tracking_report.api.tracker import BatchTracker
from fedex_tracking_report.io.inputs import read_tracking_numbers
from fedex_tracking_report.io.report_writer import write_csv, write_xlsx
from fedex_tracking_report.models import DELIVERY_STATUS_LABELS, CompleteTrackResult
from fedex_tracking_report.pipelines.projector import project_report


def status_counts(records: Mapping[str, CompleteTrackResult]) -> Counter:
    """Count records by derived status label ("Unknown" when absent)."""
    counts: Counter = Counter()
    for rec in records.values():
        tr = rec.first_result
        lsd = tr.latest_status_detail if tr is not None else None
        code = (lsd.derived_code or lsd.code) if lsd is not None else ""
        counts[DELIVERY_STATUS_LABELS.get(code, code or "Unknown")] += 1
    return counts


class ReportRunner:
    """Reads tracking numbers, queries FedEx, and writes the flattened report.

    The report is written only after every batch has been fetched and
    validated; any earlier failure propagates and leaves no output file.
    """

    def __init__(
        self,
        logger,
        *,
        authenticator: Authenticator,
        tracker: BatchTracker,
        preserve_input_order: bool = True,
        xlsx_path: Optional[Path] = None,
    ) -> None:
        self.logger = logger
        self.authenticator = authenticator
        self.tracker = tracker
        self.preserve_input_order = preserve_input_order
        self.xlsx_path = Path(xlsx_path) if xlsx_path else None

    def run(self, input_path: Path, output_path: Path) -> dict[str, Any]:
        input_path = Path(input_path)
        output_path = Path(output_path)

        if not input_path.exists():
            self.logger.error("Input file does not exist: %s", input_path)
            raise FileNotFoundError(input_path)

        tracking_numbers = read_tracking_numbers(input_path)
        self.logger.info("Read %d tracking numbers from %s",
                         len(tracking_numbers), input_path.name)

        token = self.authenticator.fetch_token()
        records = self.tracker.track(tracking_numbers, token)
        self.logger.info("Received %d tracking records in %d batch(es)",
                         len(records), self.tracker.batches_sent)

        self._log_track_errors(records)
        for label, n in sorted(status_counts(records).items()):
            self.logger.info("Status %s: %d", label, n)

        rows = project_report(
            records, tracking_numbers if self.preserve_input_order else None)

        write_csv(rows, output_path)
        self.logger.info("Wrote report → %s (%d rows)", output_path, len(rows))
        if self.xlsx_path is not None:
            write_xlsx(rows, self.xlsx_path)
            self.logger.info("Wrote Excel report → %s", self.xlsx_path)

        return {
            "output_path": str(output_path),
            "tracking_numbers": len(tracking_numbers),
            "batches": self.tracker.batches_sent,
            "rows": len(rows),
            "timestamp_utc": dt.datetime.now(dt.timezone.utc).isoformat(),
        }

    def _log_track_errors(self, records: Mapping[str, CompleteTrackResult]) -> None:
        for tn, rec in records.items():
            tr = rec.first_result
            if tr is not None and tr.error is not None:
                self.logger.warning("FedEx returned an error for %s: %s %s",
                                    tn, tr.error.code, tr.error.message or "")
