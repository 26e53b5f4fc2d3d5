# src/fedex_tracking_report/io/report_writer.py
from __future__ import annotations

import csv
import warnings
from pathlib import Path
from typing import Sequence

import pandas as pd
from openpyxl import load_workbook

from fedex_tracking_report.models import REPORT_COLUMNS, ReportRow

SHEET_NAME = "Tracking Report"


def rows_to_frame(rows: Sequence[ReportRow]) -> pd.DataFrame:
    """All cells as text so pandas never reformats numbers or tracking numbers."""
    return pd.DataFrame(
        [row.to_csv_cols() for row in rows],
        columns=list(REPORT_COLUMNS),
        dtype="object",
    )


def render_csv(rows: Sequence[ReportRow]) -> str:
    """
    Header line plus one line per row, '\\n' line endings. Fields are quoted
    only when they contain a delimiter, quote or newline. The writer does not
    treat a lone '\\r' as special under '\\n' line endings, so a report holding
    one is written fully quoted.
    """
    has_cr = any("\r" in v for row in rows for v in row.to_csv_cols().values())
    quoting = csv.QUOTE_ALL if has_cr else csv.QUOTE_MINIMAL
    return rows_to_frame(rows).to_csv(index=False, lineterminator="\n", quoting=quoting)


def write_csv(rows: Sequence[ReportRow], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_csv(rows), encoding="utf-8", newline="")
    return path


def write_xlsx(rows: Sequence[ReportRow], path: Path) -> Path:
    """Excel copy of the report; the tracking number column is stored as text."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = rows_to_frame(rows)
    df["delayInDays"] = pd.to_numeric(df["delayInDays"], errors="coerce")

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with pd.ExcelWriter(path, engine="openpyxl", mode="w") as xw:
            df.to_excel(xw, sheet_name=SHEET_NAME, index=False, na_rep="")

    wb = load_workbook(path)
    ws = wb[SHEET_NAME]
    tn_col = REPORT_COLUMNS.index("trackingNumber") + 1
    for r in range(2, ws.max_row + 1):
        ws.cell(row=r, column=tn_col).number_format = "@"
    wb.save(path)
    return path
