"""Port interface for reading provider locations."""

from abc import ABC, abstractmethod

from app.domain.entities.provider import Provider


class ProviderRepository(ABC):
    @abstractmethod
    async def get_by_id(self, provider_id: int) -> Provider | None:
        ...
