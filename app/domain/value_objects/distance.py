"""Great-circle distance helpers on a spherical Earth."""

from __future__ import annotations

import math

from app.domain.value_objects.geo_point import GeoPoint

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MILES = 3958.8


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two points in kilometres.

    Degenerate input (NaN) propagates as NaN instead of raising.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude) - math.radians(a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_miles(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two points in statute miles."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude) - math.radians(a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def is_within_radius(a: GeoPoint, b: GeoPoint, radius_km: float) -> bool:
    # Inclusive boundary
    return distance_km(a, b) <= radius_km


def format_distance(km: float) -> str:
    """Human-readable distance: metres below 1 km, otherwise one decimal km.

    >>> format_distance(0.85)
    '850 m'
    >>> format_distance(2.549)
    '2.5 km'
    """
    if km < 1.0:
        return f"{round(km * 1000)} m"
    return f"{km:.1f} km"
