"""
Locations API: resolve a search, pick a point on the map, read/set the current selection.
"""
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from location_finder.api.deps import get_resolver, get_selection, get_selection_if_exists, get_user_id
from location_finder.core.constants import ADDRESS_MAX_LENGTH
from location_finder.services.geocode_resolver import GeocodeResolver
from location_finder.services.selection_state import SelectionState
from location_finder.services.types import ResolvedLocation

router = APIRouter()


class ResolveRequest(BaseModel):
    query: str = Field(..., max_length=ADDRESS_MAX_LENGTH, description="Address, city, landmark or coordinates")


class MapClick(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


def _selection_payload(location: ResolvedLocation | None, selected: bool) -> dict[str, Any]:
    return {"location": location.model_dump() if location else None, "selected": selected}


@router.post("/resolve")
def resolve_location(
    body: ResolveRequest,
    resolver: GeocodeResolver = Depends(get_resolver),
    selection: SelectionState = Depends(get_selection),
    user_id: str | None = Depends(get_user_id),
) -> dict[str, Any]:
    """
    Geocode a search (cache first) and make it the current selection.
    selected=false means a newer request for the same session finished first.
    """
    ticket = selection.begin()
    resolved = resolver.resolve(body.query, user_id)
    return _selection_payload(resolved, selection.apply(ticket, resolved))


@router.post("/select")
def select_map_point(
    body: MapClick,
    selection: SelectionState = Depends(get_selection),
) -> dict[str, Any]:
    """Map click: the clicked coordinates become the selection, labelled with the coordinate pair."""
    location = ResolvedLocation.from_map_click(body.latitude, body.longitude)
    return _selection_payload(location, selection.select(location))


@router.put("/selection")
def set_selection(
    body: ResolvedLocation,
    selection: SelectionState = Depends(get_selection),
) -> dict[str, Any]:
    """Select a location picked from favorites or history."""
    return _selection_payload(body, selection.select(body))


@router.get("/selection")
def get_current_selection(
    selection: SelectionState | None = Depends(get_selection_if_exists),
) -> dict[str, Any]:
    if selection is None:
        return {"location": None, "sequence": 0}
    location = selection.current()
    return {"location": location.model_dump() if location else None, "sequence": selection.sequence}
