from location_finder.services.favorites_service import delete_favorite, list_favorites, toggle_favorite
from location_finder.services.geocode_resolver import GeocodeResolver
from location_finder.services.history_service import list_history, record_search
from location_finder.services.location_store import LocationStore

__all__ = [
    "GeocodeResolver",
    "LocationStore",
    "delete_favorite",
    "list_favorites",
    "list_history",
    "record_search",
    "toggle_favorite",
]
