"""ServiceListing entity — an offer made by a provider at the provider's location."""

from dataclasses import dataclass

from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class ServiceListing:
    id: int | None
    title: str
    category: str | None
    provider_id: int
    provider_name: str
    location: GeoPoint | None = None
    price: float | None = None
    active: bool = True
