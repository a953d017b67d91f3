"""In-memory GeocodeCache — unbounded, no TTL, lives as long as the process."""

from __future__ import annotations

import logging

from app.application.ports.geocode_cache import GeocodeCache
from app.domain.value_objects.geo_point import GeoLocation

logger = logging.getLogger(__name__)


class InMemoryGeocodeCache(GeocodeCache):
    def __init__(self):
        self._entries: dict[int, GeoLocation] = {}

    def get(self, postal_code: int) -> GeoLocation | None:
        return self._entries.get(postal_code)

    def put(self, postal_code: int, location: GeoLocation) -> None:
        self._entries[postal_code] = location

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Pincode cache cleared")

    def size(self) -> int:
        return len(self._entries)
