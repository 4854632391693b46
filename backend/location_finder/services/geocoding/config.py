"""Geocoding API config. Base URL, User-Agent and timeout from settings or GeocodingClient args."""
from location_finder.config import settings


class GeocodingConfig:
    """Endpoint and client identification for the Nominatim-compatible search API."""

    __slots__ = ("base_url", "user_agent", "timeout")

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        self.user_agent = (user_agent or settings.geocoder_user_agent).strip()
        self.timeout = settings.geocoder_timeout_seconds if timeout is None else timeout

    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
