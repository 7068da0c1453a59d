"""Natal chart assembly.

``compute_chart`` is the single entry point used by the HTTP layer and the CLI:
validate, normalise time, look up every body independently, compute the angles,
build whole-sign houses. Only malformed input raises; provider failures degrade
the chart in place.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .angles import angles_for
from .constants import BODY_NAMES, normalize360
from .ephem import EphemerisProvider, SwissEphemerisProvider
from .errors import BODY_UNAVAILABLE
from .houses import build_houses
from .models import BirthInput, BodyPosition, Chart
from .timebase import to_instant
from .validation import ensure_valid

logger = logging.getLogger(__name__)


def body_position(provider: EphemerisProvider, name: str, instant) -> BodyPosition:
    """Look up one body; any provider failure yields an empty slot with a note."""

    try:
        lon = float(provider.body_ecliptic_longitude(name, instant))
        if not math.isfinite(lon):
            raise ValueError(f"non-finite longitude {lon!r}")
    except Exception as exc:
        logger.warning("chart_body_unavailable", extra={"body": name, "reason": str(exc)})
        return BodyPosition(name=name, note=f"{BODY_UNAVAILABLE}: {exc}")
    return BodyPosition.at(name, normalize360(lon))


def compute_chart(
    birth: BirthInput,
    provider: Optional[EphemerisProvider] = None,
    *,
    parallel: bool = False,
) -> Chart:
    """Compute the natal chart for ``birth``.

    Raises ``ValidationFailed`` or ``InvalidTimeFormat`` before any provider
    call; otherwise always returns a chart with seven body slots and twelve
    houses, possibly degraded.
    """

    ensure_valid(birth)
    instant = to_instant(birth.civil_date, birth.civil_time, birth.utc_offset_hours)
    provider = provider if provider is not None else SwissEphemerisProvider()

    if parallel:
        with ThreadPoolExecutor(max_workers=len(BODY_NAMES) + 1) as executor:
            angles_future = executor.submit(
                angles_for, provider, instant, birth.latitude_deg, birth.longitude_deg
            )
            bodies = tuple(executor.map(lambda n: body_position(provider, n, instant), BODY_NAMES))
            angles = angles_future.result()
    else:
        bodies = tuple(body_position(provider, name, instant) for name in BODY_NAMES)
        angles = angles_for(provider, instant, birth.latitude_deg, birth.longitude_deg)

    chart = Chart(
        angles=angles,
        bodies=bodies,
        houses=build_houses(angles, bodies),
        computed_at_utc=instant,
    )
    if chart.degraded:
        logger.info("chart_degraded", extra={"warnings": chart.warnings()})
    return chart
