"""Ascendant and meridian geometry.

The functions here take raw sidereal time and obliquity (from an ephemeris
provider) plus the observer's geographic position and return ecliptic
longitudes for the chart angles. ``compute_angles`` is pure; ``angles_for``
wraps it with the provider calls and turns provider failures into an
unavailable :class:`AngleSet`.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime

from .constants import normalize360
from .ephem import EphemerisProvider
from .models import AngleSet

logger = logging.getLogger(__name__)

# tan(latitude) is unusable this close to a pole.
POLAR_LATITUDE_LIMIT = 89.9


def local_sidereal_angle(gast_hours: float, longitude_deg: float) -> float:
    """Local sidereal time expressed as an angle in degrees, [0, 360)."""

    return normalize360(gast_hours * 15.0 + longitude_deg)


def midheaven(theta_deg: float, obliquity_deg: float) -> float:
    theta = math.radians(theta_deg)
    eps = math.radians(obliquity_deg)
    return normalize360(math.degrees(math.atan2(math.sin(theta) * math.cos(eps), math.cos(theta))))


def ascendant(theta_deg: float, obliquity_deg: float, latitude_deg: float) -> float:
    theta = math.radians(theta_deg)
    eps = math.radians(obliquity_deg)
    phi = math.radians(latitude_deg)
    y = -math.cos(theta)
    x = math.sin(theta) * math.cos(eps) + math.tan(phi) * math.sin(eps)
    return normalize360(math.degrees(math.atan2(y, x)))


def is_polar(latitude_deg: float) -> bool:
    return abs(latitude_deg) >= POLAR_LATITUDE_LIMIT


def compute_angles(
    gast_hours: float,
    obliquity_deg: float,
    latitude_deg: float,
    longitude_deg: float,
) -> AngleSet:
    """Return the Ascendant, MC and IC for the given sidereal time and place.

    At ``|latitude| >= 89.9`` the Ascendant is replaced by ``MC + 90`` and the
    result is flagged ``degenerate``.
    """

    theta = local_sidereal_angle(gast_hours, longitude_deg)
    mc = midheaven(theta, obliquity_deg)
    ic = normalize360(mc + 180.0)

    if is_polar(latitude_deg):
        logger.warning(
            "angles_degenerate_latitude",
            extra={"latitude_deg": latitude_deg, "limit": POLAR_LATITUDE_LIMIT},
        )
        return AngleSet(normalize360(mc + 90.0), mc, ic, degenerate=True)

    return AngleSet(ascendant(theta, obliquity_deg, latitude_deg), mc, ic)


def angles_for(
    provider: EphemerisProvider,
    instant: datetime,
    latitude_deg: float,
    longitude_deg: float,
) -> AngleSet:
    """Fetch sidereal time and obliquity from ``provider`` and compute the angles."""

    try:
        gast = float(provider.greenwich_apparent_sidereal_time(instant))
        obliquity = float(provider.true_obliquity(instant))
    except Exception as exc:
        logger.warning("chart_geometry_unavailable", extra={"reason": str(exc)})
        return AngleSet.unavailable_set()

    if not (math.isfinite(gast) and math.isfinite(obliquity)):
        logger.warning("chart_geometry_unavailable", extra={"gast": gast, "obliquity": obliquity})
        return AngleSet.unavailable_set()

    return compute_angles(gast, obliquity, latitude_deg, longitude_deg)
