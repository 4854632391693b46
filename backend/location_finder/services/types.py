"""Shapes passed between the resolver, the recorder, the selection state and the API."""
from typing import Any

from pydantic import BaseModel, Field

from location_finder.core.address import coordinate_label
from location_finder.core.constants import ADDRESS_MAX_LENGTH


class ResolvedLocation(BaseModel):
    """Transient result of a lookup: what the map and the details panel render."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str = Field(..., min_length=1, max_length=ADDRESS_MAX_LENGTH)
    formatted_address: str = ""

    @classmethod
    def from_map_click(cls, latitude: float, longitude: float) -> "ResolvedLocation":
        """Point picked on the map: no reverse geocoding, the coordinate pair is the address."""
        label = coordinate_label(latitude, longitude)
        return cls(latitude=latitude, longitude=longitude, address=label, formatted_address=label)


class GeocodeCandidate:
    """One parsed provider result (first candidate of a search)."""

    __slots__ = (
        "latitude",
        "longitude",
        "display_name",
        "place_type",
        "country",
        "state",
        "city",
        "postal_code",
        "importance",
    )

    def __init__(
        self,
        *,
        latitude: float,
        longitude: float,
        display_name: str | None = None,
        place_type: str | None = None,
        country: str | None = None,
        state: str | None = None,
        city: str | None = None,
        postal_code: str | None = None,
        importance: float | None = None,
    ):
        self.latitude = latitude
        self.longitude = longitude
        self.display_name = display_name
        self.place_type = place_type
        self.country = country
        self.state = state
        self.city = city
        self.postal_code = postal_code
        self.importance = importance

    def detail_fields(self) -> dict[str, Any]:
        """Columns for LocationDetail (besides address/owner)."""
        return {
            "formatted_address": self.display_name,
            "display_name": self.display_name,
            "place_type": self.place_type,
            "country": self.country,
            "state": self.state,
            "city": self.city,
            "postal_code": self.postal_code,
        }
