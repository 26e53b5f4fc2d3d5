from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class ApiBodyWriter:
    """Persist raw tracking response bodies as a single JSON array.

    The file can be fed back through `--replay`. Write failures are logged
    and never interrupt a run.
    """

    path: Path
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.logger = self.logger or logging.getLogger(
            "fedex_tracking_report.api.body_writer")
        self._items: list[Any] = []

    def add_response(self, response: Any) -> None:
        self._items.append(response)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump(self._items, fh, ensure_ascii=False, indent=2)
        except OSError as ex:
            self.logger.warning(
                "Failed to write API response bodies to %s: %s", self.path, ex)

    def read_all(self) -> list:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        return data if isinstance(data, list) else [data]
