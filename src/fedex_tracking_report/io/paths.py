from __future__ import annotations

from pathlib import Path
from typing import Tuple

REPORT_SUFFIX = "_report.csv"


def derive_output_paths(input_file: Path) -> Tuple[Path, Path]:
    """
    Given the tracking-number list, return (report_csv_path, log_path) in the same directory.

    Raises FileNotFoundError if input_file doesn't exist (explicit early signal for CLI).
    """
    p = Path(input_file)
    if not p.exists():
        raise FileNotFoundError(p)

    report = p.with_name(f"{p.stem}{REPORT_SUFFIX}")
    log = p.with_suffix(".log")
    return report, log
