"""Birth input checks run before any ephemeris work."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Tuple

from .errors import InvalidTimeFormat, ValidationFailed, Violation
from .models import BirthInput
from .timebase import parse_civil_date, parse_civil_time

RANGES: dict[str, Tuple[float, float]] = {
    "latitude_deg": (-90.0, 90.0),
    "longitude_deg": (-180.0, 180.0),
    "utc_offset_hours": (-12.0, 14.0),
}


def _check_text(field: str, value: Any, parse) -> List[Violation]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return [Violation(field, "required", f"{field} is required")]
    try:
        parse(value)
    except InvalidTimeFormat as exc:
        return [Violation(field, "invalid_format", str(exc))]
    return []


def _check_number(field: str, value: Any) -> List[Violation]:
    lo, hi = RANGES[field]
    if isinstance(value, bool) or not isinstance(value, Real):
        return [Violation(field, "not_a_number", f"{field} must be a number")]
    if not math.isfinite(value):
        return [Violation(field, "not_finite", f"{field} must be finite")]
    if not lo <= value <= hi:
        return [Violation(field, "out_of_range", f"{field} must be within [{lo:g}, {hi:g}], got {value:g}")]
    return []


def validate_birth_input(birth: BirthInput) -> List[Violation]:
    """Return every violation in ``birth``; an empty list means it is usable."""

    violations: List[Violation] = []
    violations += _check_text("civil_date", birth.civil_date, parse_civil_date)
    violations += _check_text("civil_time", birth.civil_time, parse_civil_time)
    for field in RANGES:
        violations += _check_number(field, getattr(birth, field))
    return violations


def ensure_valid(birth: BirthInput) -> BirthInput:
    violations = validate_birth_input(birth)
    if violations:
        raise ValidationFailed(violations)
    return birth
