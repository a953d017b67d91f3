"""ProximitySearch — rank candidates by great-circle distance within a radius."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.domain.entities.listing import ServiceListing
from app.domain.exceptions import InvalidSearchParameters
from app.domain.value_objects.distance import distance_km
from app.domain.value_objects.geo_point import GeoPoint

T = TypeVar("T")


@dataclass(frozen=True)
class ProximityCandidate(Generic[T]):
    """Anything with an optional location. Candidates without one never match."""

    payload: T
    location: GeoPoint | None = None


@dataclass(frozen=True)
class ProximityResult(Generic[T]):
    candidate: ProximityCandidate[T]
    distance_km: float


def search(
    reference: GeoPoint,
    radius_km: float,
    candidates: Iterable[ProximityCandidate[T]],
    predicate: Callable[[T], bool] | None = None,
) -> list[ProximityResult[T]]:
    """Return candidates within *radius_km* of *reference*, nearest first.

    1. Validate the reference point and radius.
    2. Apply *predicate* to each payload before any distance math.
    3. Skip candidates without a location.
    4. Keep those with distance <= radius_km (inclusive).
    5. Stable sort by distance; ties keep input order.

    Raises:
        InvalidSearchParameters: malformed reference or non-positive radius.
    """
    if not reference.is_well_formed():
        raise InvalidSearchParameters(
            f"Invalid reference coordinate ({reference.latitude}, {reference.longitude}). "
            "Latitude must be between -90 and 90, longitude between -180 and 180"
        )
    if not math.isfinite(radius_km) or radius_km <= 0:
        raise InvalidSearchParameters(f"Radius must be positive, got {radius_km}")

    results: list[ProximityResult[T]] = []
    for candidate in candidates:
        if predicate is not None and not predicate(candidate.payload):
            continue
        if candidate.location is None:
            continue
        distance = distance_km(reference, candidate.location)
        if distance <= radius_km:
            results.append(ProximityResult(candidate=candidate, distance_km=distance))

    # list.sort is stable
    results.sort(key=lambda r: r.distance_km)
    return results


def category_matches(category: str | None) -> Callable[[ServiceListing], bool] | None:
    """Case-insensitive exact category filter; None when no category is given."""
    if category is None or not category.strip():
        return None
    wanted = category.lower()

    def _matches(listing: ServiceListing) -> bool:
        return listing.category is not None and listing.category.lower() == wanted

    return _matches


def listing_candidates(listings: Iterable[ServiceListing]) -> list[ProximityCandidate[ServiceListing]]:
    return [ProximityCandidate(payload=listing, location=listing.location) for listing in listings]
