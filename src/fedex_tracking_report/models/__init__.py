from .env_cfg import EnvCfg
from .carrier_cfg import CarrierConfig
from .report import REPORT_COLUMNS, ReportRow
from .tracking import (
    DELIVERY_STATUS_LABELS,
    CompleteTrackResult,
    TrackResult,
)

__all__ = [
    "EnvCfg",
    "CarrierConfig",
    "REPORT_COLUMNS",
    "ReportRow",
    "DELIVERY_STATUS_LABELS",
    "CompleteTrackResult",
    "TrackResult",
]
