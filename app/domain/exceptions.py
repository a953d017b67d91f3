"""Domain errors for geocoding and proximity search."""

from __future__ import annotations


class LocationError(Exception):
    """Base class for every error raised by the location subsystem."""


class InvalidPostalCode(LocationError, ValueError):
    def __init__(self, postal_code: object):
        self.postal_code = postal_code
        super().__init__(f"Invalid pincode {postal_code!r}. Must be 6 digits (100000-999999).")


class InvalidSearchParameters(LocationError, ValueError):
    pass


class ProviderUnavailable(LocationError):
    """A single geocoding provider could not resolve a postal code."""

    def __init__(self, provider: str, postal_code: int, reason: str):
        self.provider = provider
        self.postal_code = postal_code
        self.reason = reason
        super().__init__(f"{provider} unavailable for pincode {postal_code}: {reason}")


class AllProvidersExhausted(LocationError):
    """Every configured provider failed for this postal code."""

    def __init__(self, postal_code: int, last_error: Exception | None = None):
        self.postal_code = postal_code
        self.last_error = last_error
        super().__init__(
            f"Unable to geocode pincode {postal_code}. "
            "All geocoding services are unavailable or blocked."
        )


class ProviderNotFound(LocationError, LookupError):
    def __init__(self, provider_id: int):
        self.provider_id = provider_id
        super().__init__(f"Provider not found with ID: {provider_id}")


class LocationNotAvailable(LocationError):
    def __init__(self, provider_id: int):
        self.provider_id = provider_id
        super().__init__(
            f"Location not available for provider {provider_id}. Coordinates not set."
        )
