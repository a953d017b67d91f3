"""Geocode.xyz adapter — fallback GeocoderPort when Nominatim fails."""

from __future__ import annotations

import logging

import httpx

from app.adapters.geocoder.rate_limiter import MinIntervalRateLimiter
from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.exceptions import ProviderUnavailable
from app.domain.value_objects.geo_point import GeoLocation

logger = logging.getLogger(__name__)


class GeocodeXyzAdapter(GeocoderPort):
    """Path-style postal code lookup: ``GET /{code}?json=1&region=IN``.

    The response is a flat object with ``latt``/``longt``/``standard``.
    """

    name = "geocode.xyz"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        rate_limiter: MinIntervalRateLimiter | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = (base_url or settings.geocode_xyz_url).rstrip("/")
        self._user_agent = user_agent if user_agent is not None else settings.geocoder_user_agent
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds
        self._rate_limiter = rate_limiter or MinIntervalRateLimiter(
            settings.geocoder_min_interval_seconds
        )
        self._client = client

    async def geocode(self, postal_code: int) -> GeoLocation:
        await self._rate_limiter.wait()
        url = f"{self._base_url}/{postal_code}"
        params = {"json": 1, "region": "IN"}
        headers = {"User-Agent": self._user_agent}

        try:
            if self._client is not None:
                response = await self._client.get(
                    url, params=params, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        url, params=params, headers=headers, timeout=self._timeout
                    )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderUnavailable(self.name, postal_code, f"{type(exc).__name__}: {exc}") from exc

        if not isinstance(data, dict) or not data:
            raise ProviderUnavailable(self.name, postal_code, "empty response")
        if data.get("error"):
            raise ProviderUnavailable(self.name, postal_code, f"upstream error: {data['error']}")
        if data.get("latt") is None or data.get("longt") is None:
            raise ProviderUnavailable(self.name, postal_code, "no coordinates in response")

        try:
            lat = float(str(data["latt"]).strip())
            lon = float(str(data["longt"]).strip())
        except ValueError as exc:
            raise ProviderUnavailable(self.name, postal_code, "unparseable coordinates") from exc

        standard = data.get("standard")
        # "standard" is either an address string or an object with a city field
        if isinstance(standard, dict):
            place = standard.get("city") or standard.get("addresst")
        else:
            place = standard
        location = GeoLocation(
            latitude=lat,
            longitude=lon,
            place_name=str(place) if place else f"India, {postal_code}",
        )
        if not location.is_well_formed():
            raise ProviderUnavailable(self.name, postal_code, "coordinates out of range")

        logger.info("Geocode.xyz resolved %d → (%f, %f)", postal_code, lat, lon)
        return location
