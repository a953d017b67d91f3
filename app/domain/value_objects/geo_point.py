"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def haversine_km(self, other: "GeoPoint") -> float:
        """Great-circle distance in km to another point."""
        from app.domain.value_objects.distance import distance_km

        return distance_km(self, other)

    def is_well_formed(self) -> bool:
        """True when both values are finite and inside the WGS-84 ranges."""
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


@dataclass(frozen=True)
class GeoLocation(GeoPoint):
    """A geocoded point with an advisory place name (never used for distance)."""

    place_name: str | None = None
