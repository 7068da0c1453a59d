import os

os.environ.setdefault("EPHEMERIS_BACKEND", "moseph")

import pytest

from lagna.services.errors import EphemerisError
from lagna.services.models import BirthInput


class StubProvider:
    """Ephemeris double with fixed answers and call counting."""

    def __init__(self, longitudes=None, gast=10.0, obliquity=23.44, failing=(), geometry_fails=False):
        self.longitudes = dict(longitudes or {})
        self.gast = gast
        self.obliquity = obliquity
        self.failing = set(failing)
        self.geometry_fails = geometry_fails
        self.calls = []

    def body_ecliptic_longitude(self, body, instant):
        self.calls.append(("body", body, instant))
        if body in self.failing:
            raise EphemerisError(f"{body} ephemeris file missing")
        return self.longitudes.get(body, 0.0)

    def greenwich_apparent_sidereal_time(self, instant):
        self.calls.append(("gast", instant))
        if self.geometry_fails:
            raise EphemerisError("sidereal time unavailable")
        return self.gast

    def true_obliquity(self, instant):
        self.calls.append(("obliquity", instant))
        if self.geometry_fails:
            raise EphemerisError("obliquity unavailable")
        return self.obliquity


DEFAULT_LONGITUDES = {
    "Sun": 50.3,
    "Moon": 200.1,
    "Mercury": 35.0,
    "Venus": 20.7,
    "Mars": 330.2,
    "Jupiter": 95.4,
    "Saturn": 292.9,
}


@pytest.fixture
def stub_provider():
    def _make(**kwargs):
        kwargs.setdefault("longitudes", DEFAULT_LONGITUDES)
        return StubProvider(**kwargs)

    return _make


@pytest.fixture
def bangalore():
    return BirthInput(
        civil_date="1990-05-21",
        civil_time="14:35",
        latitude_deg=12.97,
        longitude_deg=77.59,
        utc_offset_hours=5.5,
    )
