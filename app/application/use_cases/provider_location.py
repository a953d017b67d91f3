"""ProviderLocationUseCase — where is a provider, and how far from me."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.provider_repo import ProviderRepository
from app.domain.entities.provider import Provider
from app.domain.exceptions import (
    InvalidSearchParameters,
    LocationNotAvailable,
    ProviderNotFound,
)
from app.domain.value_objects.distance import distance_km, format_distance
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderLocation:
    provider: Provider
    distance_km: float | None = None
    distance_formatted: str | None = None


class ProviderLocationUseCase:
    def __init__(self, provider_repo: ProviderRepository):
        self._providers = provider_repo

    async def execute(self, provider_id: int, origin: GeoPoint | None = None) -> ProviderLocation:
        """Return the provider's stored location, with distance when *origin* is given."""
        provider = await self._providers.get_by_id(provider_id)
        if provider is None:
            raise ProviderNotFound(provider_id)
        if provider.location is None:
            logger.warning("Provider %d has no coordinates set", provider_id)
            raise LocationNotAvailable(provider_id)

        if origin is None:
            return ProviderLocation(provider=provider)
        if not origin.is_well_formed():
            raise InvalidSearchParameters(
                f"Invalid origin coordinate ({origin.latitude}, {origin.longitude})"
            )

        distance = distance_km(origin, provider.location)
        logger.info("Distance to provider %d: %.2f km", provider_id, distance)
        return ProviderLocation(
            provider=provider,
            distance_km=round(distance, 2),
            distance_formatted=format_distance(distance),
        )
