import pytest

from lagna.services.angles import compute_angles
from lagna.services.constants import SIGN_NAMES, sign_index_from_lon, sign_name_from_lon
from lagna.services.houses import build_houses, house_of
from lagna.services.models import AngleSet, BodyPosition


def _bodies(**lons):
    return [BodyPosition.at(name, lon) for name, lon in lons.items()]


@pytest.mark.parametrize("asc", [0.0, 15.0, 130.977, 299.99, 359.5])
def test_house_signs_are_cyclic_from_ascendant(asc):
    angles = AngleSet(asc, 10.0, 190.0)
    houses = build_houses(angles, [])
    start = sign_index_from_lon(asc)
    assert [h.number for h in houses] == list(range(1, 13))
    for n, house in enumerate(houses, start=1):
        assert house.sign == SIGN_NAMES[(start + n - 1) % 12]


def test_every_body_and_angle_lands_in_its_sign_house():
    angles = compute_angles(10.0, 23.44, 12.97, 77.59)
    bodies = _bodies(Sun=50.3, Moon=200.1, Mercury=35.0, Venus=20.7, Mars=330.2, Jupiter=95.4, Saturn=292.9)
    houses = build_houses(angles, bodies)

    for b in bodies:
        holding = [h for h in houses if b.name in h.bodies]
        assert len(holding) == 1
        assert holding[0].sign == b.sign

    for marker, lon in angles.longitudes().items():
        holding = [h for h in houses if marker in h.angles]
        assert len(holding) == 1
        assert holding[0].sign == sign_name_from_lon(lon)


def test_bangalore_layout():
    angles = compute_angles(10.0, 23.44, 12.97, 77.59)
    houses = build_houses(angles, _bodies(Sun=50.3))
    assert houses[0].sign == "Leo"
    assert houses[0].angles == ("ASC",)
    assert houses[9].sign == "Taurus"
    assert houses[9].bodies == ("Sun",)
    assert houses[9].angles == ("IC",)
    assert houses[3].sign == "Scorpio"
    assert houses[3].angles == ("MC",)


def test_degenerate_ascendant_still_partitions():
    angles = compute_angles(10.0, 23.44, 90.0, 77.59)
    houses = build_houses(angles, _bodies(Sun=50.3))
    assert len(houses) == 12
    assert houses[0].sign == sign_name_from_lon(angles.ascendant_deg)
    assert sum(len(h.angles) for h in houses) == 3


def test_missing_ascendant_gives_twelve_empty_shells():
    houses = build_houses(AngleSet.unavailable_set(), _bodies(Sun=50.3, Moon=1.0))
    assert len(houses) == 12
    assert all(h.sign is None and h.bodies == () and h.angles == () for h in houses)
    assert [h.number for h in houses] == list(range(1, 13))


def test_unavailable_body_is_not_placed():
    angles = AngleSet(0.0, 270.0, 90.0)
    houses = build_houses(angles, [BodyPosition(name="Mars", note="BodyUnavailable: x")] + _bodies(Sun=5.0))
    assert all("Mars" not in h.bodies for h in houses)
    assert houses[0].bodies == ("Sun",)


def test_house_of():
    assert house_of(50.3, 130.977) == 10
    assert house_of(125.0, 130.977) == 1
    assert house_of(119.9, 130.977) == 12
