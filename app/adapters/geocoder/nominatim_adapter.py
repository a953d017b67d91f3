"""Nominatim (OpenStreetMap) geocoder adapter — primary GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from app.adapters.geocoder.rate_limiter import MinIntervalRateLimiter
from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.exceptions import ProviderUnavailable
from app.domain.value_objects.geo_point import GeoLocation

logger = logging.getLogger(__name__)

DEFAULT_PLACE_NAME = "Location in India"


class NominatimAdapter(GeocoderPort):
    """Postal code search against Nominatim, restricted to India.

    Nominatim's usage policy requires an identifying User-Agent and at most
    one request per second.
    """

    name = "nominatim"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        referer: str | None = None,
        timeout: float | None = None,
        rate_limiter: MinIntervalRateLimiter | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url or settings.nominatim_url
        self._user_agent = user_agent if user_agent is not None else settings.geocoder_user_agent
        if not self._user_agent or not self._user_agent.strip():
            raise ValueError("Nominatim requires a descriptive User-Agent")
        self._referer = referer if referer is not None else settings.geocoder_referer
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds
        self._rate_limiter = rate_limiter or MinIntervalRateLimiter(
            settings.geocoder_min_interval_seconds
        )
        self._client = client

    async def geocode(self, postal_code: int) -> GeoLocation:
        await self._rate_limiter.wait()
        params = {
            "postalcode": postal_code,
            "country": "India",
            "format": "json",
            "limit": 1,
        }
        headers = {"User-Agent": self._user_agent}
        if self._referer:
            headers["Referer"] = self._referer

        try:
            if self._client is not None:
                response = await self._client.get(
                    self._base_url, params=params, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(
                        self._base_url, params=params, headers=headers, timeout=self._timeout
                    )
            response.raise_for_status()
            results = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise ProviderUnavailable(self.name, postal_code, f"{type(exc).__name__}: {exc}") from exc

        return self._parse(postal_code, results)

    def _parse(self, postal_code: int, results: object) -> GeoLocation:
        if not isinstance(results, list) or not results:
            raise ProviderUnavailable(self.name, postal_code, "no results")

        first = results[0]
        if not isinstance(first, dict) or first.get("lat") is None or first.get("lon") is None:
            raise ProviderUnavailable(self.name, postal_code, "incomplete coordinates")

        try:
            lat = float(first["lat"])
            lon = float(first["lon"])
        except (TypeError, ValueError) as exc:
            raise ProviderUnavailable(self.name, postal_code, "unparseable coordinates") from exc

        location = GeoLocation(
            latitude=lat,
            longitude=lon,
            place_name=first.get("display_name") or DEFAULT_PLACE_NAME,
        )
        if not location.is_well_formed():
            raise ProviderUnavailable(self.name, postal_code, "coordinates out of range")

        logger.info("Nominatim resolved %d → (%f, %f)", postal_code, lat, lon)
        return location
