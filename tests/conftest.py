"""Pytest configuration and shared fixtures."""

import pytest

from app.domain.value_objects.geo_point import GeoLocation, GeoPoint


@pytest.fixture
def new_delhi():
    return GeoPoint(latitude=28.6448, longitude=77.2167)


@pytest.fixture
def mumbai():
    return GeoPoint(latitude=19.0760, longitude=72.8777)


@pytest.fixture
def connaught_place():
    return GeoLocation(
        latitude=28.6315, longitude=77.2167, place_name="Connaught Place, New Delhi, India"
    )
