"""
Shared FastAPI dependencies: current user, store, geocoding client, selection state.

Routes depend on these instead of module globals so tests can override each one.
"""
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from location_finder.core.auth import CurrentUser, user_from_authorization
from location_finder.db.session import get_db
from location_finder.services.geocode_resolver import GeocodeResolver
from location_finder.services.geocoding import GeocodingClient, default_client
from location_finder.services.location_store import LocationStore
from location_finder.services.selection_state import SelectionRegistry, SelectionState, default_registry


def get_current_user(authorization: str | None = Header(None)) -> CurrentUser | None:
    """Signed-in user from the bearer token, or None for anonymous requests."""
    return user_from_authorization(authorization)


def get_user_id(user: CurrentUser | None = Depends(get_current_user)) -> str | None:
    return user.id if user else None


def get_store(db: Session = Depends(get_db)) -> LocationStore:
    return LocationStore(db)


def get_geocoding_client() -> GeocodingClient:
    return default_client


def get_resolver(
    store: LocationStore = Depends(get_store),
    client: GeocodingClient = Depends(get_geocoding_client),
) -> GeocodeResolver:
    return GeocodeResolver(store, client)


def get_selection_registry() -> SelectionRegistry:
    return default_registry


def get_selection(
    x_session_id: str | None = Header(None, alias="X-Session-Id"),
    registry: SelectionRegistry = Depends(get_selection_registry),
) -> SelectionState:
    return registry.get(x_session_id)


def get_selection_if_exists(
    x_session_id: str | None = Header(None, alias="X-Session-Id"),
    registry: SelectionRegistry = Depends(get_selection_registry),
) -> SelectionState | None:
    """Read-only lookup: unknown sessions get None instead of a new registry entry."""
    return registry.peek(x_session_id)
