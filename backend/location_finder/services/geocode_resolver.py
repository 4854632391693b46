"""
Geocode resolver: free-text query -> ResolvedLocation, cache first.

1. Blank query is rejected before touching the store or the network.
2. Cache: exact canonical-key match, then case-insensitive substring match (newest first).
   A cached detail only counts if it has a coordinate.
3. Miss: one call to the geocoding API; the result is written back (detail + coordinate).
   A failed write is logged and the lookup still succeeds.
Signed-in users get a history row on every successful lookup.
"""
import logging
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from location_finder.core.address import address_key
from location_finder.core.errors import LocationNotFound, QueryValidationError
from location_finder.models.location_coordinate import LocationCoordinate
from location_finder.models.location_detail import LocationDetail
from location_finder.services.geocoding import GeocodingClient, geocode
from location_finder.services.history_service import record_search
from location_finder.services.location_store import LocationStore
from location_finder.services.types import GeocodeCandidate, ResolvedLocation

logger = logging.getLogger(__name__)


class GeocodeResolver:
    """Store and geocoding client are injected; nothing here reaches for globals."""

    def __init__(self, store: LocationStore, client: GeocodingClient | None = None) -> None:
        self._store = store
        self._client = client

    def _candidates(self, query: str) -> Iterator[LocationDetail]:
        # Substring query only runs if no exact-key match has a coordinate.
        yield from self._store.find_by_key(address_key(query))
        yield from self._store.find_by_substring(query)

    def _lookup_cached(self, query: str) -> tuple[LocationDetail, LocationCoordinate] | None:
        for detail in self._candidates(query):
            coord = self._store.first_coordinate(detail)
            if coord is not None:
                return detail, coord
        return None

    def _persist(self, query: str, candidate: GeocodeCandidate, user_id: str | None) -> LocationDetail | None:
        try:
            return self._store.create_location(
                address=query,
                latitude=candidate.latitude,
                longitude=candidate.longitude,
                user_id=user_id,
                accuracy=candidate.importance,
                **candidate.detail_fields(),
            )
        except SQLAlchemyError as e:
            logger.warning("Persistence warning: could not cache geocode for %r: %s", query, e, exc_info=True)
            self._store.rollback()
            return None

    def resolve(self, query: str | None, user_id: str | None = None) -> ResolvedLocation:
        """
        Resolve a search query. Raises QueryValidationError (blank), LocationNotFound (no candidates)
        or GeocodingFailure (provider unreachable, non-2xx or malformed).
        """
        text = (query or "").strip()
        if not text:
            raise QueryValidationError()

        cached = self._lookup_cached(text)
        if cached is not None:
            detail, coord = cached
            logger.debug("Geocode cache hit for %r -> location_detail %s", text, detail.id)
            record_search(self._store, user_id, text, detail.id)
            return ResolvedLocation(
                latitude=coord.latitude,
                longitude=coord.longitude,
                address=detail.address,
                formatted_address=detail.formatted_address or detail.display_name or detail.address,
            )

        candidate = geocode(text, self._client)
        if candidate is None:
            logger.info("Geocoding found nothing for %r", text)
            raise LocationNotFound()

        detail = self._persist(text, candidate, user_id)
        if detail is not None:
            record_search(self._store, user_id, text, detail.id)
        logger.info("Geocoded %r -> %s, %s", text, candidate.latitude, candidate.longitude)
        return ResolvedLocation(
            latitude=candidate.latitude,
            longitude=candidate.longitude,
            address=text,
            formatted_address=candidate.display_name or text,
        )
