"""Geocoding: parse provider candidates. Validation here; client below just sends the request."""
import logging
from typing import Any

from location_finder.core.errors import GeocodingFailure
from location_finder.services.geocoding.client import GeocodingClient
from location_finder.services.geocoding.config import GeocodingConfig
from location_finder.services.types import GeocodeCandidate

logger = logging.getLogger(__name__)

default_client = GeocodingClient()


def _float_or_none(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _str_or_none(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def parse_candidate(raw: dict[str, Any]) -> GeocodeCandidate:
    """
    Turn one provider result into a GeocodeCandidate.
    lat/lon arrive as decimal strings; missing, non-numeric or out-of-range values are a provider failure.
    """
    if not isinstance(raw, dict):
        raise GeocodingFailure()
    latitude = _float_or_none(raw.get("lat"))
    longitude = _float_or_none(raw.get("lon"))
    if latitude is None or longitude is None:
        logger.warning("Geocoding candidate without usable lat/lon: %r", raw)
        raise GeocodingFailure()
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        logger.warning("Geocoding candidate out of range: lat=%s lon=%s", latitude, longitude)
        raise GeocodingFailure()
    address = raw.get("address") if isinstance(raw.get("address"), dict) else {}
    city = address.get("city") or address.get("town") or address.get("village")
    return GeocodeCandidate(
        latitude=latitude,
        longitude=longitude,
        display_name=_str_or_none(raw.get("display_name")),
        place_type=_str_or_none(raw.get("type")),
        country=_str_or_none(address.get("country")),
        state=_str_or_none(address.get("state")),
        city=_str_or_none(city),
        postal_code=_str_or_none(address.get("postcode")),
        importance=_float_or_none(raw.get("importance")),
    )


def geocode(query: str, client: GeocodingClient | None = None) -> GeocodeCandidate | None:
    """
    Forward-geocode free text. Returns the first candidate, or None when the provider found nothing.
    Raises GeocodingFailure on transport errors, non-2xx responses and malformed payloads.
    """
    results = (client or default_client).search(query)
    if not results:
        return None
    return parse_candidate(results[0])


__all__ = ["GeocodingClient", "GeocodingConfig", "default_client", "geocode", "parse_candidate"]
