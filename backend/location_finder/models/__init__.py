from location_finder.models.favorite import Favorite
from location_finder.models.location_coordinate import LocationCoordinate
from location_finder.models.location_detail import LocationDetail
from location_finder.models.search_history import SearchHistoryEntry

__all__ = [
    "Favorite",
    "LocationCoordinate",
    "LocationDetail",
    "SearchHistoryEntry",
]
