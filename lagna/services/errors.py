"""Exceptions and degradation markers raised or attached by the chart engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# Non-fatal degradations are reported as markers on the chart, never raised.
GEOMETRY_UNAVAILABLE = "GeometryUnavailable"
BODY_UNAVAILABLE = "BodyUnavailable"


class ChartError(Exception):
    """Base class for chart engine failures."""


class InvalidTimeFormat(ChartError, ValueError):
    """Raised when the civil date or time cannot be parsed.

    ``field`` names the birth input field at fault.
    """

    def __init__(self, message: str, field: str = "civil_date"):
        super().__init__(message)
        self.field = field


class EphemerisError(ChartError, RuntimeError):
    """Raised by an ephemeris provider that cannot answer a query."""


@dataclass(frozen=True)
class Violation:
    """One problem found in a birth input."""

    field: str
    code: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "code": self.code, "message": self.message}


class ValidationFailed(ChartError, ValueError):
    """Raised with every violation found in a birth input."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations: tuple[Violation, ...] = tuple(violations)
        summary = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(summary or "invalid birth input")

    def as_dict(self) -> dict:
        return {
            "error": "ValidationFailed",
            "violations": [v.as_dict() for v in self.violations],
        }
