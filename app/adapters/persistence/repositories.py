"""SQLAlchemy repository implementations (read-only)."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.adapters.persistence.models import ServiceListingModel, UserModel
from app.application.ports.listing_repo import ListingRepository
from app.application.ports.provider_repo import ProviderRepository
from app.domain.entities.listing import ServiceListing
from app.domain.entities.provider import Provider
from app.domain.value_objects.enums import Role
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

# ─── Mappers ─────────────────────────────────────────────────────────


def _location(lat: float | None, lon: float | None) -> GeoPoint | None:
    # Coordinates are set together or not at all
    if lat is None or lon is None:
        return None
    return GeoPoint(latitude=lat, longitude=lon)


def _role(value: str) -> Role:
    # Unknown roles map to CUSTOMER
    try:
        return Role(value)
    except ValueError:
        logger.warning("Unknown user role %r, treating as %s", value, Role.CUSTOMER.value)
        return Role.CUSTOMER


def _provider_to_domain(m: UserModel) -> Provider:
    return Provider(
        id=m.id,
        name=m.name,
        role=_role(m.role),
        city=m.city,
        pincode=m.pincode,
        location=_location(m.latitude, m.longitude),
        updated_at=m.updated_at,
    )


def _listing_to_domain(m: ServiceListingModel) -> ServiceListing:
    return ServiceListing(
        id=m.id,
        title=m.title,
        category=m.category.name if m.category else None,
        provider_id=m.provider_id,
        provider_name=m.provider.name,
        location=_location(m.provider.latitude, m.provider.longitude),
        price=float(m.price) if m.price is not None else None,
        active=m.active,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlListingRepository(ListingRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_active(self) -> list[ServiceListing]:
        result = await self._session.execute(
            select(ServiceListingModel)
            .options(
                joinedload(ServiceListingModel.provider),
                joinedload(ServiceListingModel.category),
            )
            .where(ServiceListingModel.active.is_(True))
            .order_by(ServiceListingModel.id)
        )
        return [_listing_to_domain(m) for m in result.unique().scalars().all()]


class SqlProviderRepository(ProviderRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, provider_id: int) -> Provider | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == provider_id)
        )
        m = result.scalar_one_or_none()
        return _provider_to_domain(m) if m else None
