"""SearchNearbyUseCase — listings around a postal code or GPS point."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.ports.listing_repo import ListingRepository
from app.application.use_cases.resolve_location import LocationResolver
from app.domain.entities.listing import ServiceListing
from app.domain.policies.proximity_search import (
    category_matches,
    listing_candidates,
    search,
)
from app.domain.value_objects.distance import format_distance
from app.domain.value_objects.geo_point import GeoLocation, GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearbyListing:
    listing: ServiceListing
    distance_km: float
    distance_formatted: str


@dataclass(frozen=True)
class NearbySearchResult:
    """Search origin plus matching listings ordered nearest-first."""

    origin: GeoPoint
    radius_km: float
    category: str | None
    listings: list[NearbyListing]


class SearchNearbyUseCase:
    def __init__(self, resolver: LocationResolver, listing_repo: ListingRepository):
        self._resolver = resolver
        self._listings = listing_repo

    async def by_postal_code(
        self, postal_code: int, radius_km: float, category: str | None = None
    ) -> NearbySearchResult:
        origin: GeoLocation = await self._resolver.resolve(postal_code)
        logger.info(
            "Searching services near pincode %d within %s km", postal_code, radius_km
        )
        return await self.by_coordinates(origin, radius_km, category)

    async def by_coordinates(
        self, origin: GeoPoint, radius_km: float, category: str | None = None
    ) -> NearbySearchResult:
        """Rank active listings around *origin*.

        Raises InvalidSearchParameters for a malformed origin or radius.
        """
        listings = await self._listings.get_active()
        logger.info("Found %d active listings to check", len(listings))

        results = search(
            origin,
            radius_km,
            listing_candidates(listings),
            predicate=category_matches(category),
        )
        logger.info("Found %d services within %s km radius", len(results), radius_km)

        return NearbySearchResult(
            origin=origin,
            radius_km=radius_km,
            category=category,
            listings=[
                NearbyListing(
                    listing=r.candidate.payload,
                    distance_km=round(r.distance_km, 2),
                    distance_formatted=format_distance(r.distance_km),
                )
                for r in results
            ],
        )
