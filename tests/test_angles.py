from datetime import datetime, timezone

import pytest

from lagna.services import angles
from lagna.services.constants import normalize360
from lagna.services.errors import GEOMETRY_UNAVAILABLE

INSTANT = datetime(1990, 5, 21, 9, 5, tzinfo=timezone.utc)


def test_bangalore_regression():
    # gast 10h at 77.59E gives a local sidereal angle of 227.59°
    a = angles.compute_angles(10.0, 23.44, 12.97, 77.59)
    assert a.ascendant_deg == pytest.approx(130.977, abs=0.01)
    assert a.midheaven_deg == pytest.approx(225.126, abs=0.01)
    assert a.imum_coeli_deg == pytest.approx(45.126, abs=0.01)
    assert a.degenerate is False
    assert a.unavailable is None


def test_local_sidereal_angle_wraps():
    assert angles.local_sidereal_angle(23.0, 30.0) == pytest.approx(15.0)
    assert angles.local_sidereal_angle(0.0, -15.0) == pytest.approx(345.0)


@pytest.mark.parametrize("lat", [90.0, -90.0, 89.9, -89.95])
def test_polar_latitude_uses_flagged_fallback(lat):
    a = angles.compute_angles(10.0, 23.44, lat, 77.59)
    assert a.degenerate is True
    assert a.ascendant_deg == pytest.approx(normalize360(a.midheaven_deg + 90.0))


@pytest.mark.parametrize("lat", [0.0, 45.0, -66.5, 89.89, -89.89])
def test_standard_formula_below_polar_limit(lat):
    a = angles.compute_angles(3.3, 23.44, lat, -0.1)
    assert a.degenerate is False
    assert 0.0 <= a.ascendant_deg < 360.0


@pytest.mark.parametrize("gast", [0.0, 3.7, 6.0, 12.0, 18.25, 23.999])
@pytest.mark.parametrize("lat", [-89.95, -45.0, 0.0, 51.5, 90.0])
def test_ic_is_opposite_mc(gast, lat):
    a = angles.compute_angles(gast, 23.44, lat, 10.0)
    assert 0.0 <= a.ascendant_deg < 360.0
    assert 0.0 <= a.midheaven_deg < 360.0
    assert normalize360(a.imum_coeli_deg - a.midheaven_deg) == pytest.approx(180.0)


def test_mc_on_equinox_meridian():
    # With zero local sidereal angle the vernal point culminates.
    a = angles.compute_angles(0.0, 23.44, 40.0, 0.0)
    assert a.midheaven_deg == pytest.approx(0.0)
    assert a.imum_coeli_deg == pytest.approx(180.0)


def test_provider_failure_marks_geometry_unavailable(stub_provider):
    a = angles.angles_for(stub_provider(geometry_fails=True), INSTANT, 12.97, 77.59)
    assert a.unavailable == GEOMETRY_UNAVAILABLE
    assert a.ascendant_deg is None and a.midheaven_deg is None and a.imum_coeli_deg is None
    assert not a.available


def test_provider_nan_marks_geometry_unavailable(stub_provider):
    a = angles.angles_for(stub_provider(gast=float("nan")), INSTANT, 12.97, 77.59)
    assert a.unavailable == GEOMETRY_UNAVAILABLE


def test_angles_for_matches_pure_computation(stub_provider):
    a = angles.angles_for(stub_provider(), INSTANT, 12.97, 77.59)
    assert a == angles.compute_angles(10.0, 23.44, 12.97, 77.59)
