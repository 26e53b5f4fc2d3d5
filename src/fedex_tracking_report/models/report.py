from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Union

# Header order of the CSV report
REPORT_COLUMNS: tuple[str, ...] = (
    "trackingNumber",
    "status",
    "shipDate",
    "standardTransitDate",
    "actualDeliveryDate",
    "delayInDays",
    "serviceType",
    "weightValue",
    "weightUnit",
    "dimensionLength",
    "dimensionWidth",
    "dimensionHeight",
    "dimensionUnit",
)

Number = Union[int, float]


@dataclass(frozen=True)
class ReportRow:
    trackingNumber: str
    status: str = ""
    shipDate: str = ""
    standardTransitDate: str = ""
    actualDeliveryDate: str = ""
    delayInDays: float = 0.0
    serviceType: str = ""
    weightValue: str = ""
    weightUnit: str = ""
    dimensionLength: Number = 0
    dimensionWidth: Number = 0
    dimensionHeight: Number = 0
    dimensionUnit: str = ""

    def to_csv_cols(self) -> dict[str, str]:
        """Every report column rendered as text, in REPORT_COLUMNS order."""
        values = asdict(self)
        return {col: str(values[col]) for col in REPORT_COLUMNS}
