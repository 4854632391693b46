"""
Favorites: toggle a location in/out of the user's favorites, list and delete them.

Matching uses the canonical address key, so "Paris, France" and " paris,  france" are one favorite.
"""
import logging
from typing import Any

from location_finder.core.address import address_key
from location_finder.core.errors import AuthRequired, FavoriteNotFound, MSG_SIGN_IN_FAVORITES
from location_finder.models.location_detail import LocationDetail
from location_finder.services.location_store import LocationStore
from location_finder.services.serializers import location_payload
from location_finder.services.types import ResolvedLocation

logger = logging.getLogger(__name__)


def _require_user(user_id: str | None) -> str:
    if not user_id:
        raise AuthRequired(MSG_SIGN_IN_FAVORITES)
    return user_id


def _ensure_location(store: LocationStore, location: ResolvedLocation, user_id: str) -> LocationDetail:
    """Reuse the newest stored detail for this address that has a coordinate, else create one."""
    for detail in store.find_by_key(address_key(location.address)):
        if store.first_coordinate(detail) is not None:
            return detail
    return store.create_location(
        address=location.address,
        latitude=location.latitude,
        longitude=location.longitude,
        user_id=user_id,
        formatted_address=location.formatted_address or None,
        display_name=location.formatted_address or None,
    )


def is_favorited(store: LocationStore, location: ResolvedLocation, user_id: str | None) -> bool:
    """Heart state for the details panel. Anonymous users have no favorites."""
    if not user_id:
        return False
    return bool(store.find_favorites(user_id, address_key(location.address)))


def toggle_favorite(
    store: LocationStore,
    location: ResolvedLocation,
    user_id: str | None,
    *,
    name: str | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """
    Add the location to the user's favorites, or remove it if it is already there.
    Returns {"favorited": bool, "favorite_id": int | None}. Requires a signed-in user.
    """
    user_id = _require_user(user_id)
    existing = store.find_favorites(user_id, address_key(location.address))
    if existing:
        store.delete_favorites(existing)
        logger.info("Removed favorite for user %s: %s", user_id, location.address)
        return {"favorited": False, "favorite_id": None}
    detail = _ensure_location(store, location, user_id)
    row = store.add_favorite(user_id, detail.id, name=name, notes=notes)
    logger.info("Added favorite %s for user %s: %s", row.id, user_id, location.address)
    return {"favorited": True, "favorite_id": row.id}


def list_favorites(store: LocationStore, user_id: str | None) -> list[dict[str, Any]]:
    """All favorites for the user, newest first."""
    user_id = _require_user(user_id)
    return [
        {
            "id": r.id,
            "name": r.name,
            "notes": r.notes,
            "created_at": r.created_at.isoformat() if r.created_at else None,
            "location": location_payload(store, r.location_detail),
        }
        for r in store.list_favorites(user_id)
    ]


def delete_favorite(store: LocationStore, favorite_id: int, user_id: str | None) -> None:
    """Delete one favorite owned by the user. Someone else's id looks the same as a missing one."""
    user_id = _require_user(user_id)
    row = store.get_favorite(favorite_id)
    if row is None or row.user_id != user_id:
        raise FavoriteNotFound()
    store.delete_favorites([row])
    logger.info("Deleted favorite %s for user %s", favorite_id, user_id)
