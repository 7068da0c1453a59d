from __future__ import annotations

from typing import Iterable

from .constants import SIGN_NAMES, sign_index_from_lon
from .models import AngleSet, BodyPosition, House


def whole_sign_indices(asc_lon: float) -> list[int]:
    # Sign index for houses 1..12: house 1 = ascendant's sign, then zodiac order
    start = sign_index_from_lon(asc_lon)
    return [(start + i) % 12 for i in range(12)]


def house_of(lon: float, asc_lon: float) -> int:
    """Whole-sign house number (1..12) of ``lon`` for an ascendant at ``asc_lon``."""

    return (sign_index_from_lon(lon) - sign_index_from_lon(asc_lon)) % 12 + 1


def empty_houses() -> tuple[House, ...]:
    return tuple(House(number=i + 1, sign=None) for i in range(12))


def build_houses(angles: AngleSet, bodies: Iterable[BodyPosition]) -> tuple[House, ...]:
    """Partition the zodiac into twelve whole-sign houses and place bodies and angles.

    Without an ascendant the twelve houses are returned as sign-less shells.
    Bodies without a longitude are left out of every house.
    """

    asc = angles.ascendant_deg
    if asc is None:
        return empty_houses()

    placed_bodies: list[list[str]] = [[] for _ in range(12)]
    placed_angles: list[list[str]] = [[] for _ in range(12)]

    for body in bodies:
        if body.longitude_deg is None:
            continue
        placed_bodies[house_of(body.longitude_deg, asc) - 1].append(body.name)

    for marker, lon in angles.longitudes().items():
        if lon is None:
            continue
        placed_angles[house_of(lon, asc) - 1].append(marker)

    return tuple(
        House(
            number=i + 1,
            sign=SIGN_NAMES[sidx],
            bodies=tuple(placed_bodies[i]),
            angles=tuple(placed_angles[i]),
        )
        for i, sidx in enumerate(whole_sign_indices(asc))
    )
