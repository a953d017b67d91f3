"""Tests for GeoPoint / GeoLocation value objects."""

import math

from app.domain.value_objects.geo_point import GeoLocation, GeoPoint


def test_haversine_same_point():
    """Distance from a point to itself should be 0."""
    p = GeoPoint(latitude=28.6448, longitude=77.2167)
    assert p.haversine_km(p) == 0.0


def test_haversine_delhi_to_mumbai(new_delhi, mumbai):
    """New Delhi to Mumbai is roughly 1150 km in a straight line."""
    distance = new_delhi.haversine_km(mumbai)
    assert 1150 < distance < 1160


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=28.0, longitude=77.0)
    try:
        p.latitude = 50.0
        assert False, "Should have raised FrozenInstanceError"
    except AttributeError:
        pass


def test_geo_location_is_a_geo_point(connaught_place):
    assert isinstance(connaught_place, GeoPoint)
    assert connaught_place.place_name.startswith("Connaught Place")


def test_place_name_does_not_affect_distance(connaught_place):
    bare = GeoPoint(latitude=connaught_place.latitude, longitude=connaught_place.longitude)
    other = GeoPoint(latitude=19.0760, longitude=72.8777)
    assert connaught_place.haversine_km(other) == bare.haversine_km(other)


def test_well_formed_bounds():
    assert GeoPoint(latitude=90.0, longitude=180.0).is_well_formed()
    assert GeoPoint(latitude=-90.0, longitude=-180.0).is_well_formed()
    assert not GeoPoint(latitude=90.01, longitude=0.0).is_well_formed()
    assert not GeoPoint(latitude=0.0, longitude=-180.5).is_well_formed()


def test_non_finite_is_not_well_formed():
    assert not GeoPoint(latitude=math.nan, longitude=0.0).is_well_formed()
    assert not GeoPoint(latitude=0.0, longitude=math.inf).is_well_formed()
