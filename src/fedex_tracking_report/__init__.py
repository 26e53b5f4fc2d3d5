# src/fedex_tracking_report/__init__.py
from .api.auth import Authenticator
from .api.tracker import BatchTracker
from .pipelines.report_runner import ReportRunner

__all__ = [
    "Authenticator",
    "BatchTracker",
    "ReportRunner",
]
