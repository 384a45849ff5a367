import pytest

from vendormap.core.geo import GeoPoint, bearing_deg, distance_km, haversine_km
from vendormap.domain.models import Coordinates

DARMSTADT = GeoPoint(lat=49.8728, lng=8.6512)
FRANKFURT = GeoPoint(lat=50.1109, lng=8.6821)

PAIRS = [
    (DARMSTADT, FRANKFURT),
    (GeoPoint(0, 0), GeoPoint(0, 1)),
    (GeoPoint(-33.8688, 151.2093), GeoPoint(51.5074, -0.1278)),
    (GeoPoint(0, 179.5), GeoPoint(0, -179.5)),
    (GeoPoint(60, 0), GeoPoint(-30, 100)),
]


@pytest.mark.parametrize("a,b", PAIRS)
def test_distance_is_symmetric(a, b):
    assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=0.01)


@pytest.mark.parametrize("point", [DARMSTADT, GeoPoint(0, 0), GeoPoint(-90, 180)])
def test_distance_to_self_is_zero(point):
    assert distance_km(point, point) == 0
    assert bearing_deg(point, point) == 0.0


def test_distance_is_rounded_to_two_decimals():
    d = distance_km(DARMSTADT, FRANKFURT)
    assert d == round(haversine_km(DARMSTADT, FRANKFURT), 2)
    assert 26.5 <= d <= 27.0


def test_one_degree_on_the_equator():
    assert distance_km(GeoPoint(0, 0), GeoPoint(0, 1)) == pytest.approx(111.19, abs=0.01)
    assert distance_km(GeoPoint(0, 0), GeoPoint(1, 0)) == pytest.approx(111.19, abs=0.01)


def test_triangle_inequality_holds_roughly():
    mannheim = GeoPoint(49.4875, 8.4662)
    direct = distance_km(FRANKFURT, mannheim)
    via = distance_km(FRANKFURT, DARMSTADT) + distance_km(DARMSTADT, mannheim)
    assert direct <= via + 0.01


@pytest.mark.parametrize(
    "target,expected",
    [
        (GeoPoint(1, 0), 0.0),
        (GeoPoint(0, 1), 90.0),
        (GeoPoint(-1, 0), 180.0),
        (GeoPoint(0, -1), 270.0),
    ],
)
def test_bearing_cardinal_directions(target, expected):
    assert bearing_deg(GeoPoint(0, 0), target) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("a,b", PAIRS)
def test_bearing_is_in_range_and_not_symmetric(a, b):
    forward = bearing_deg(a, b)
    backward = bearing_deg(b, a)
    assert 0 <= forward < 360
    assert 0 <= backward < 360
    assert forward != pytest.approx(backward)


def test_bearing_darmstadt_to_frankfurt_is_north_ish():
    b = bearing_deg(DARMSTADT, FRANKFURT)
    assert b < 10 or b > 350


def test_out_of_range_input_is_not_validated():
    # Meaningless but defined: the math layer never raises on odd coordinates.
    d = distance_km(GeoPoint(120, 0), GeoPoint(0, 400))
    assert d >= 0


def test_accepts_pydantic_coordinates():
    a = Coordinates(lat=DARMSTADT.lat, lng=DARMSTADT.lng)
    b = Coordinates(lat=FRANKFURT.lat, lng=FRANKFURT.lng)
    assert distance_km(a, b) == distance_km(DARMSTADT, FRANKFURT)
