"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.cache.memory_cache import InMemoryGeocodeCache
from app.adapters.geocoder.geocode_xyz_adapter import GeocodeXyzAdapter
from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import (
    SqlListingRepository,
    SqlProviderRepository,
)
from app.application.use_cases.provider_location import ProviderLocationUseCase
from app.application.use_cases.resolve_location import LocationResolver
from app.application.use_cases.search_nearby import SearchNearbyUseCase

# Process-wide singletons: the cache and each provider's rate limiter
# must be shared by every request.
_geocode_cache = InMemoryGeocodeCache()
_resolver = LocationResolver(
    providers=[NominatimAdapter(), GeocodeXyzAdapter()],
    cache=_geocode_cache,
)


def get_location_resolver() -> LocationResolver:
    return _resolver


def get_listing_repo(session: AsyncSession = Depends(get_session)) -> SqlListingRepository:
    return SqlListingRepository(session)


def get_provider_repo(session: AsyncSession = Depends(get_session)) -> SqlProviderRepository:
    return SqlProviderRepository(session)


def get_search_nearby_uc(
    resolver: LocationResolver = Depends(get_location_resolver),
    listing_repo: SqlListingRepository = Depends(get_listing_repo),
) -> SearchNearbyUseCase:
    return SearchNearbyUseCase(resolver=resolver, listing_repo=listing_repo)


def get_provider_location_uc(
    provider_repo: SqlProviderRepository = Depends(get_provider_repo),
) -> ProviderLocationUseCase:
    return ProviderLocationUseCase(provider_repo=provider_repo)
