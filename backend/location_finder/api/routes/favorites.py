"""Favorites API: toggle, status, list and delete. All routes need a signed-in user."""
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from location_finder.api.deps import get_store, get_user_id
from location_finder.services.favorites_service import (
    delete_favorite,
    is_favorited,
    list_favorites,
    toggle_favorite,
)
from location_finder.services.location_store import LocationStore
from location_finder.services.types import ResolvedLocation

router = APIRouter()


class ToggleFavoriteBody(BaseModel):
    location: ResolvedLocation
    name: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=2000)


@router.post("/toggle")
def toggle(
    body: ToggleFavoriteBody,
    store: LocationStore = Depends(get_store),
    user_id: str | None = Depends(get_user_id),
) -> dict[str, Any]:
    """Add the location to favorites, or remove it if already there."""
    return toggle_favorite(store, body.location, user_id, name=body.name, notes=body.notes)


@router.post("/status")
def status(
    body: ResolvedLocation,
    store: LocationStore = Depends(get_store),
    user_id: str | None = Depends(get_user_id),
) -> dict[str, bool]:
    """Whether the location is in the user's favorites (false for anonymous users)."""
    return {"favorited": is_favorited(store, body, user_id)}


@router.get("")
def list_all(
    store: LocationStore = Depends(get_store),
    user_id: str | None = Depends(get_user_id),
) -> list[dict[str, Any]]:
    """All favorites, newest first."""
    return list_favorites(store, user_id)


@router.delete("/{favorite_id}")
def delete(
    favorite_id: int,
    store: LocationStore = Depends(get_store),
    user_id: str | None = Depends(get_user_id),
) -> dict[str, Any]:
    delete_favorite(store, favorite_id, user_id)
    return {"ok": True, "id": favorite_id}
