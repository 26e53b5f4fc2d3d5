# src/fedex_tracking_report/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from fedex_tracking_report.api.schema import ValidationIssue


class TrackingReportError(RuntimeError):
    """Base class for failures that abort a report run."""


class AuthenticationError(TrackingReportError):
    """Token request failed or the response had no usable access token."""


class TrackingRequestError(TrackingReportError):
    """A tracking POST failed at the transport/HTTP level or returned non-JSON."""


class SchemaValidationError(TrackingReportError):
    """A tracking response did not match the expected shape."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue] = ()) -> None:
        self.issues = tuple(issues)
        if self.issues:
            details = "; ".join(f"{i.path}: {i.message}" for i in self.issues)
            message = f"{message} ({details})"
        super().__init__(message)


__all__ = [
    "TrackingReportError",
    "AuthenticationError",
    "TrackingRequestError",
    "SchemaValidationError",
]
