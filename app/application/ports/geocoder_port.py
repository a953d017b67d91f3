"""Port interface for resolving postal codes to coordinates."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoLocation


class GeocoderPort(ABC):
    name: str = "geocoder"

    @abstractmethod
    async def geocode(self, postal_code: int) -> GeoLocation:
        """Convert a 6-digit postal code to a GeoLocation.

        Raises ProviderUnavailable on network failure, non-2xx status,
        an empty result, or a result without usable coordinates.
        """
        ...
