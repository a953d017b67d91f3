"""Port interface for reading service listings (read-only for this service)."""

from abc import ABC, abstractmethod

from app.domain.entities.listing import ServiceListing


class ListingRepository(ABC):
    @abstractmethod
    async def get_active(self) -> list[ServiceListing]:
        ...
