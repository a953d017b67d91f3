"""Port interface for the postal code → GeoLocation memo table."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoLocation


class GeocodeCache(ABC):
    @abstractmethod
    def get(self, postal_code: int) -> GeoLocation | None:
        ...

    @abstractmethod
    def put(self, postal_code: int, location: GeoLocation) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def size(self) -> int:
        ...
