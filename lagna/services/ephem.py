"""Ephemeris provider boundary and its Swiss Ephemeris implementation."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Dict, Protocol

import swisseph as swe

from .errors import EphemerisError
from .timebase import to_jd_utc

logger = logging.getLogger(__name__)

# Engine version for API responses
ENGINE_VERSION = f"swisseph-{getattr(swe, 'version', '2.10')}"

BODIES: Dict[str, int] = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mercury": swe.MERCURY,
    "Venus": swe.VENUS,
    "Mars": swe.MARS,
    "Jupiter": swe.JUPITER,
    "Saturn": swe.SATURN,
}


class EphemerisProvider(Protocol):
    """Raw positional astronomy consumed by the chart engine.

    Implementations raise :class:`EphemerisError` (or any exception) when a
    query cannot be answered; the engine isolates failures per call.
    """

    def body_ecliptic_longitude(self, body: str, instant: datetime) -> float:
        """Geocentric apparent ecliptic longitude in degrees, [0, 360)."""

    def greenwich_apparent_sidereal_time(self, instant: datetime) -> float:
        """Greenwich apparent sidereal time in hours, [0, 24)."""

    def true_obliquity(self, instant: datetime) -> float:
        """True obliquity of the ecliptic in degrees."""


def backend_name() -> str:
    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return "moseph" if backend == "moseph" else "swieph"


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    return swe.FLG_MOSEPH if backend_name() == "moseph" else swe.FLG_SWIEPH


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)
    else:
        logger.warning("ephemeris_dir_missing", extra={"ephe_dir": path})


class SwissEphemerisProvider:
    """Tropical geocentric positions from ``pyswisseph``.

    The backend flag is resolved once, at construction, from ``EPHEMERIS_BACKEND``.
    """

    def __init__(self, ephe_dir: str | os.PathLike[str] | None = None) -> None:
        init_paths(ephe_dir if ephe_dir is not None else os.getenv("EPHEMERIS_DIR"))
        self.flag = _backend_flag()

    def body_ecliptic_longitude(self, body: str, instant: datetime) -> float:
        code = BODIES.get(body)
        if code is None:
            raise EphemerisError(f"unsupported body {body!r}")
        try:
            values, _ = swe.calc_ut(to_jd_utc(instant), code, self.flag)
        except swe.Error as exc:
            raise EphemerisError(f"{body}: {exc}") from exc
        return values[0] % 360.0

    def greenwich_apparent_sidereal_time(self, instant: datetime) -> float:
        return swe.sidtime(to_jd_utc(instant)) % 24.0

    def true_obliquity(self, instant: datetime) -> float:
        try:
            values, _ = swe.calc_ut(to_jd_utc(instant), swe.ECL_NUT, self.flag)
        except swe.Error as exc:
            raise EphemerisError(f"obliquity: {exc}") from exc
        # ECL_NUT yields (true obliquity, mean obliquity, nutation lon, nutation obl, ...)
        return values[0]
