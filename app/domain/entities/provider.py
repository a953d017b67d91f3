"""Provider entity — the location-bearing part of a marketplace user."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.value_objects.enums import Role
from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class Provider:
    id: int | None
    name: str
    role: Role
    city: str | None = None
    pincode: int | None = None
    location: GeoPoint | None = None
    updated_at: datetime | None = None
