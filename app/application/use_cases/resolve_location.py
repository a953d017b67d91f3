"""LocationResolver — cache, then geocoding providers in order."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from app.application.ports.geocode_cache import GeocodeCache
from app.application.ports.geocoder_port import GeocoderPort
from app.domain.exceptions import (
    AllProvidersExhausted,
    InvalidPostalCode,
    ProviderUnavailable,
)
from app.domain.value_objects.geo_point import GeoLocation

logger = logging.getLogger(__name__)

MIN_POSTAL_CODE = 100000
MAX_POSTAL_CODE = 999999


@dataclass
class _InFlight:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    waiters: int = 0


def validate_postal_code(postal_code: object) -> int:
    """Return the postal code if it is a 6-digit Indian pincode, else raise."""
    if (
        isinstance(postal_code, bool)
        or not isinstance(postal_code, int)
        or not MIN_POSTAL_CODE <= postal_code <= MAX_POSTAL_CODE
    ):
        raise InvalidPostalCode(postal_code)
    return postal_code


class LocationResolver:
    """Resolve postal codes to GeoLocations.

    Successful results are memoised in the injected cache. Failed lookups
    are never cached: the next call tries every provider again. Concurrent
    misses for the same code are coalesced so only one of them goes upstream.
    """

    def __init__(self, providers: Sequence[GeocoderPort], cache: GeocodeCache):
        if not providers:
            raise ValueError("LocationResolver needs at least one geocoding provider")
        self._providers = list(providers)
        self._cache = cache
        self._inflight: dict[int, _InFlight] = {}

    async def resolve(self, postal_code: int) -> GeoLocation:
        """Return coordinates for *postal_code*.

        Raises:
            InvalidPostalCode: code outside 100000..999999 (no provider is called).
            AllProvidersExhausted: every provider failed.
        """
        code = validate_postal_code(postal_code)

        cached = self._cache.get(code)
        if cached is not None:
            logger.debug("Cache hit for pincode %d", code)
            return cached

        entry = self._inflight.get(code)
        if entry is None:
            entry = self._inflight[code] = _InFlight()
        entry.waiters += 1
        try:
            async with entry.lock:
                # Another caller may have filled the cache while we waited
                cached = self._cache.get(code)
                if cached is not None:
                    return cached
                return await self._resolve_uncached(code)
        finally:
            entry.waiters -= 1
            if entry.waiters == 0:
                self._inflight.pop(code, None)

    async def _resolve_uncached(self, code: int) -> GeoLocation:
        last_error: ProviderUnavailable | None = None
        for provider in self._providers:
            logger.info("Attempting %s for pincode %d", provider.name, code)
            try:
                location = await provider.geocode(code)
            except ProviderUnavailable as exc:
                logger.warning("%s failed for pincode %d: %s", provider.name, code, exc.reason)
                last_error = exc
                continue

            self._cache.put(code, location)
            return location

        logger.error("All geocoding services failed for pincode %d", code)
        raise AllProvidersExhausted(code, last_error)

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_size(self) -> int:
        return self._cache.size()
