"""Row -> dict helpers shared by the favorites and history listings."""
from typing import Any

from location_finder.models.location_detail import LocationDetail
from location_finder.services.location_store import LocationStore


def location_payload(store: LocationStore, detail: LocationDetail | None) -> dict[str, Any] | None:
    """
    Nested location for a favorite/history row: address, formatted_address, latitude, longitude.
    None when the detail is gone; coordinates default to 0 when the detail has none.
    """
    if detail is None:
        return None
    coord = store.first_coordinate(detail)
    return {
        "id": detail.id,
        "address": detail.address,
        "formatted_address": detail.formatted_address or detail.display_name or "",
        "latitude": coord.latitude if coord else 0.0,
        "longitude": coord.longitude if coord else 0.0,
    }
