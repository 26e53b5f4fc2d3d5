# src/fedex_tracking_report/api/schema.py
"""
Typed parse step for tracking responses.

Parsing never raises on malformed carrier data. Callers receive either
`ParseOk` holding typed models or `ParseFailure` listing every offending
path, and decide themselves whether that is fatal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Tuple, TypeVar, Union

from pydantic import ValidationError

from fedex_tracking_report.models.tracking import CompleteTrackResult

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str


@dataclass(frozen=True)
class ParseOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class ParseFailure:
    issues: Tuple[ValidationIssue, ...] = field(default_factory=tuple)

    def prefixed(self, prefix: str) -> "ParseFailure":
        return ParseFailure(tuple(
            ValidationIssue(f"{prefix}.{i.path}" if i.path else prefix, i.message)
            for i in self.issues
        ))


ParseResult = Union[ParseOk[T], ParseFailure]


def _issues_from(exc: ValidationError) -> Tuple[ValidationIssue, ...]:
    return tuple(
        ValidationIssue(".".join(str(p) for p in err["loc"]), err["msg"])
        for err in exc.errors()
    )


def parse_track_result(obj: Any) -> ParseResult[CompleteTrackResult]:
    """Validate one `completeTrackResults` element."""
    try:
        return ParseOk(CompleteTrackResult.model_validate(obj))
    except ValidationError as exc:
        return ParseFailure(_issues_from(exc))


def parse_tracking_response(payload: Any) -> ParseResult[List[CompleteTrackResult]]:
    """
    Validate a whole tracking response body:
    `{"output": {"completeTrackResults": [...]}}`.
    Stops at the first element that fails.
    """
    if not isinstance(payload, dict):
        return ParseFailure((ValidationIssue("", "response body is not an object"),))

    output = payload.get("output")
    if not isinstance(output, dict):
        return ParseFailure((ValidationIssue("output", "missing or not an object"),))

    ctr = output.get("completeTrackResults")
    if not isinstance(ctr, list):
        return ParseFailure((ValidationIssue(
            "output.completeTrackResults", "missing or not a list"),))

    parsed: List[CompleteTrackResult] = []
    for i, item in enumerate(ctr):
        result = parse_track_result(item)
        if isinstance(result, ParseFailure):
            return result.prefixed(f"output.completeTrackResults.{i}")
        parsed.append(result.value)
    return ParseOk(parsed)


__all__ = [
    "ValidationIssue",
    "ParseOk",
    "ParseFailure",
    "ParseResult",
    "parse_track_result",
    "parse_tracking_response",
]
