"""Immutable value types produced by the chart engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .constants import ANGLE_MARKERS, fmt_deg, sign_name_from_lon
from .errors import GEOMETRY_UNAVAILABLE


@dataclass(frozen=True)
class BirthInput:
    """Caller supplied birth details; ``utc_offset_hours`` is authoritative."""

    civil_date: str
    civil_time: str
    latitude_deg: float
    longitude_deg: float
    utc_offset_hours: float


@dataclass(frozen=True)
class BodyPosition:
    name: str
    longitude_deg: Optional[float] = None
    sign: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def at(cls, name: str, longitude_deg: float) -> "BodyPosition":
        return cls(name=name, longitude_deg=longitude_deg, sign=sign_name_from_lon(longitude_deg))

    @property
    def available(self) -> bool:
        return self.longitude_deg is not None


@dataclass(frozen=True)
class AngleSet:
    """Ascendant, Midheaven and Imum Coeli ecliptic longitudes.

    ``degenerate`` is set when the observer sits within 0.1° of a pole and the
    Ascendant was substituted by ``MC + 90``. ``unavailable`` carries
    ``GeometryUnavailable`` when the provider could not supply sidereal time or
    obliquity; every longitude is then ``None``.
    """

    ascendant_deg: Optional[float]
    midheaven_deg: Optional[float]
    imum_coeli_deg: Optional[float]
    degenerate: bool = False
    unavailable: Optional[str] = None

    @classmethod
    def unavailable_set(cls) -> "AngleSet":
        return cls(None, None, None, degenerate=False, unavailable=GEOMETRY_UNAVAILABLE)

    @property
    def available(self) -> bool:
        return self.unavailable is None

    def longitudes(self) -> Dict[str, Optional[float]]:
        return dict(zip(ANGLE_MARKERS, (self.ascendant_deg, self.midheaven_deg, self.imum_coeli_deg)))


@dataclass(frozen=True)
class House:
    number: int
    sign: Optional[str]
    bodies: tuple[str, ...] = ()
    angles: tuple[str, ...] = ()


@dataclass(frozen=True)
class Chart:
    angles: AngleSet
    bodies: tuple[BodyPosition, ...]
    houses: tuple[House, ...]
    computed_at_utc: datetime

    @property
    def ascendant_sign(self) -> Optional[str]:
        if self.angles.ascendant_deg is None:
            return None
        return sign_name_from_lon(self.angles.ascendant_deg)

    @property
    def degraded(self) -> bool:
        return not self.angles.available or any(not b.available for b in self.bodies)

    def body(self, name: str) -> BodyPosition:
        for b in self.bodies:
            if b.name == name:
                return b
        raise KeyError(name)

    def warnings(self) -> list[str]:
        notes = [b.note for b in self.bodies if b.note]
        if self.angles.unavailable:
            notes.append(f"{self.angles.unavailable}: ascendant, MC and IC could not be computed")
        if self.angles.degenerate:
            notes.append("Observer latitude within 0.1° of a pole; ascendant set to MC + 90°")
        return notes

    def to_dict(self) -> Dict[str, Any]:
        def _r(x: Optional[float]) -> Optional[float]:
            return None if x is None else round(x, 4)

        return {
            "ascendant": self.ascendant_sign,
            "angles": {
                "ascendant": _r(self.angles.ascendant_deg),
                "mc": _r(self.angles.midheaven_deg),
                "ic": _r(self.angles.imum_coeli_deg),
                "degenerate": self.angles.degenerate,
                "unavailable": self.angles.unavailable,
            },
            "planets": [
                {
                    "name": b.name,
                    "longitude": _r(b.longitude_deg),
                    "position": None if b.longitude_deg is None else fmt_deg(b.longitude_deg),
                    "sign": b.sign,
                    "note": b.note,
                }
                for b in self.bodies
            ],
            "houses": [
                {"number": h.number, "sign": h.sign, "planets": list(h.bodies), "angles": list(h.angles)}
                for h in self.houses
            ],
            "computed_at_utc": self.computed_at_utc.isoformat(),
        }
