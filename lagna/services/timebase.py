"""Conversion of local civil birth time into an absolute UTC instant."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import swisseph as swe

from .errors import InvalidTimeFormat

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def parse_civil_date(date_str: str) -> datetime:
    try:
        return datetime.strptime(date_str.strip(), DATE_FORMAT)
    except (AttributeError, ValueError) as exc:
        raise InvalidTimeFormat(f"date {date_str!r} is not YYYY-MM-DD") from exc


def parse_civil_time(time_str: str) -> timedelta:
    """Return the time of day as an offset from midnight."""

    if isinstance(time_str, str):
        for fmt in TIME_FORMATS:
            try:
                t = datetime.strptime(time_str.strip(), fmt)
            except ValueError:
                continue
            return timedelta(hours=t.hour, minutes=t.minute, seconds=t.second)
    raise InvalidTimeFormat(f"time {time_str!r} is not HH:MM or HH:MM:SS", field="civil_time")


def to_instant(date_str: str, time_str: str, utc_offset_hours: float) -> datetime:
    """Convert a naive civil timestamp and a numeric UTC offset to a UTC instant.

    No timezone database is consulted: the caller's offset wins, so daylight
    saving must already be folded into it.
    """

    local = parse_civil_date(date_str) + parse_civil_time(time_str)
    try:
        utc = local - timedelta(hours=float(utc_offset_hours))
    except OverflowError as exc:
        raise InvalidTimeFormat(
            f"{date_str} {time_str} shifted by {utc_offset_hours}h is out of range", field="utc_offset_hours"
        ) from exc
    return utc.replace(tzinfo=timezone.utc)


def to_jd_utc(instant: datetime) -> float:
    """Julian day (UT) for an instant; naive values are taken as UTC."""

    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    hour = (
        instant.hour
        + instant.minute / 60
        + instant.second / 3600
        + instant.microsecond / 3_600_000_000
    )
    return swe.julday(instant.year, instant.month, instant.day, hour, swe.GREG_CAL)
