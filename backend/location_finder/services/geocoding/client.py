"""Geocoding API client: lowest level, sends the search request and returns the decoded JSON."""
import logging
from typing import Any

import httpx

from location_finder.core.constants import GEOCODER_RESULT_LIMIT, GEOCODER_SEARCH_PATH
from location_finder.core.errors import GeocodingFailure
from location_finder.services.geocoding.config import GeocodingConfig

logger = logging.getLogger(__name__)


class GeocodingClient:
    """Forward geocoding against a Nominatim-compatible /search endpoint. Single call, no retry."""

    def __init__(
        self,
        config: GeocodingConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or GeocodingConfig()
        self._transport = transport

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self._config.base_url}{path}"
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as c:
                r = c.get(url, params=params, headers=self._config.headers())
        except httpx.HTTPError as e:
            logger.warning("Geocoding request failed: %s", e)
            raise GeocodingFailure() from e
        if not r.is_success:
            logger.warning("Geocoding API error: %s %s", r.status_code, (r.text[:500] if r.text else ""))
            raise GeocodingFailure()
        try:
            return r.json()
        except ValueError as e:
            logger.warning("Geocoding API returned non-JSON body: %s", (r.text[:500] if r.text else ""))
            raise GeocodingFailure() from e

    def search(self, query: str, *, limit: int = GEOCODER_RESULT_LIMIT) -> list[dict[str, Any]]:
        """GET /search?q=...&format=json&limit=N&addressdetails=1. Returns the raw candidate list."""
        params = {
            "q": query,
            "format": "json",
            "limit": limit,
            "addressdetails": 1,
        }
        data = self._get(GEOCODER_SEARCH_PATH, params)
        if not isinstance(data, list):
            logger.warning("Geocoding API returned %s instead of a list", type(data).__name__)
            raise GeocodingFailure()
        return data
