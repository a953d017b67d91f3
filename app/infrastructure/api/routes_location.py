"""Location endpoints — pincode geocoding, nearby search, distances, cache admin."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.application.use_cases.provider_location import (
    ProviderLocation,
    ProviderLocationUseCase,
)
from app.application.use_cases.resolve_location import LocationResolver
from app.application.use_cases.search_nearby import NearbySearchResult, SearchNearbyUseCase
from app.config import settings
from app.domain.exceptions import (
    AllProvidersExhausted,
    InvalidPostalCode,
    InvalidSearchParameters,
    LocationNotAvailable,
    ProviderNotFound,
)
from app.domain.value_objects.distance import distance_km, distance_miles, format_distance
from app.domain.value_objects.geo_point import GeoLocation, GeoPoint
from app.infrastructure.api.dependencies import (
    get_location_resolver,
    get_provider_location_uc,
    get_search_nearby_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/location", tags=["location"])


@router.get("/pincode/{pincode}")
async def get_coordinates(
    pincode: int,
    resolver: LocationResolver = Depends(get_location_resolver),
):
    """Resolve a 6-digit Indian pincode to coordinates."""
    try:
        location = await resolver.resolve(pincode)
    except InvalidPostalCode as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllProvidersExhausted as e:
        raise HTTPException(status_code=503, detail=_unavailable_message(e))

    return _envelope("Coordinates retrieved successfully", _serialize_location(location))


@router.get("/nearby")
async def search_nearby(
    pincode: int,
    radius_km: float = Query(default=settings.default_radius_km, alias="radiusKm"),
    category: str | None = None,
    uc: SearchNearbyUseCase = Depends(get_search_nearby_uc),
):
    """Services within *radius_km* of a pincode, nearest first."""
    try:
        result = await uc.by_postal_code(pincode, radius_km, category)
    except (InvalidPostalCode, InvalidSearchParameters) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllProvidersExhausted as e:
        raise HTTPException(status_code=503, detail=_unavailable_message(e))

    message = (
        f"Found {len(result.listings)} services within {radius_km:g} km of pincode {pincode}"
    )
    return _envelope(message, _serialize_search(result))


@router.get("/nearby/coordinates")
async def search_nearby_coordinates(
    latitude: float,
    longitude: float,
    radius_km: float = Query(default=settings.default_radius_km, alias="radiusKm"),
    category: str | None = None,
    uc: SearchNearbyUseCase = Depends(get_search_nearby_uc),
):
    """Services within *radius_km* of a GPS position, nearest first."""
    try:
        result = await uc.by_coordinates(
            GeoPoint(latitude=latitude, longitude=longitude), radius_km, category
        )
    except InvalidSearchParameters as e:
        raise HTTPException(status_code=400, detail=str(e))

    message = f"Found {len(result.listings)} services within {radius_km:g} km"
    return _envelope(message, _serialize_search(result))


@router.get("/distance")
async def get_distance(
    from_lat: float = Query(ge=-90, le=90),
    from_lon: float = Query(ge=-180, le=180),
    to_lat: float = Query(ge=-90, le=90),
    to_lon: float = Query(ge=-180, le=180),
):
    """Great-circle distance between two coordinates."""
    a = GeoPoint(latitude=from_lat, longitude=from_lon)
    b = GeoPoint(latitude=to_lat, longitude=to_lon)
    km = distance_km(a, b)
    return _envelope(
        "Distance calculated successfully",
        {
            "distance_km": round(km, 3),
            "distance_miles": round(distance_miles(a, b), 3),
            "distance_formatted": format_distance(km),
        },
    )


@router.get("/providers/{provider_id}")
async def get_provider_location(
    provider_id: int,
    latitude: float | None = None,
    longitude: float | None = None,
    uc: ProviderLocationUseCase = Depends(get_provider_location_uc),
):
    """A provider's location, plus distance when the caller passes their own position."""
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=400, detail="latitude and longitude must be supplied together"
        )
    origin = None
    if latitude is not None and longitude is not None:
        origin = GeoPoint(latitude=latitude, longitude=longitude)

    try:
        result = await uc.execute(provider_id, origin)
    except ProviderNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (LocationNotAvailable, InvalidSearchParameters) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _envelope("User location retrieved successfully", _serialize_provider(result))


# ─── Admin ───────────────────────────────────────────────────────────


@router.delete("/cache")
async def clear_cache(resolver: LocationResolver = Depends(get_location_resolver)):
    """Drop every cached pincode. Callers are responsible for authorization."""
    resolver.clear_cache()
    return _envelope("Pincode cache cleared successfully", None)


@router.get("/cache/stats")
async def cache_stats(resolver: LocationResolver = Depends(get_location_resolver)):
    return _envelope("Cache statistics retrieved", {"cached_pincodes": resolver.cache_size()})


# ─── Serializers ─────────────────────────────────────────────────────


def _envelope(message: str, data) -> dict:
    return {"success": True, "message": message, "data": data}


def _unavailable_message(e: AllProvidersExhausted) -> str:
    return f"Geocoding temporarily unavailable for pincode {e.postal_code}. Please try again later."


def _serialize_location(location: GeoLocation) -> dict:
    return {
        "latitude": location.latitude,
        "longitude": location.longitude,
        "location": location.place_name,
    }


def _serialize_search(result: NearbySearchResult) -> dict:
    return {
        "origin": {"latitude": result.origin.latitude, "longitude": result.origin.longitude},
        "radius_km": result.radius_km,
        "category": result.category,
        "total": len(result.listings),
        "services": [
            {
                "id": n.listing.id,
                "title": n.listing.title,
                "category": n.listing.category,
                "price": n.listing.price,
                "provider_id": n.listing.provider_id,
                "provider_name": n.listing.provider_name,
                "distance_km": n.distance_km,
                "distance_formatted": n.distance_formatted,
            }
            for n in result.listings
        ],
    }


def _serialize_provider(result: ProviderLocation) -> dict:
    p = result.provider
    return {
        "user_id": p.id,
        "name": p.name,
        "role": p.role.value,
        "latitude": p.location.latitude if p.location else None,
        "longitude": p.location.longitude if p.location else None,
        "city": p.city,
        "pincode": p.pincode,
        "last_updated": p.updated_at.isoformat() if p.updated_at else None,
        "distance_km": result.distance_km,
        "distance_formatted": result.distance_formatted,
    }
