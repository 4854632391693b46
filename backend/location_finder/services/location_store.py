"""
Location store: data access over location_details, location_coordinates, favorites and search_history.

Each write commits its own unit of work. Services get a LocationStore instead of a raw Session
so tests can point it at an in-memory database.
"""
import logging
from typing import Any

from sqlalchemy.orm import Session

from location_finder.core.address import address_key
from location_finder.models.favorite import Favorite
from location_finder.models.location_coordinate import LocationCoordinate
from location_finder.models.location_detail import LocationDetail
from location_finder.models.search_history import SearchHistoryEntry

logger = logging.getLogger(__name__)


class LocationStore:
    """Create/read/delete for the four location relations, bound to one Session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def rollback(self) -> None:
        self.db.rollback()

    # --- Location details + coordinates ---

    def create_location(
        self,
        *,
        address: str,
        latitude: float,
        longitude: float,
        user_id: str | None = None,
        accuracy: float | None = None,
        elevation: float | None = None,
        **detail_fields: Any,
    ) -> LocationDetail:
        """Insert a detail and its coordinate in one commit."""
        detail = LocationDetail(
            address=address,
            address_key=address_key(address),
            user_id=user_id,
            **detail_fields,
        )
        self.db.add(detail)
        self.db.flush()
        self.db.add(
            LocationCoordinate(
                location_detail_id=detail.id,
                latitude=latitude,
                longitude=longitude,
                accuracy=accuracy,
                elevation=elevation,
            )
        )
        self.db.commit()
        self.db.refresh(detail)
        return detail

    def get_location(self, detail_id: int) -> LocationDetail | None:
        return self.db.query(LocationDetail).filter(LocationDetail.id == detail_id).first()

    def first_coordinate(self, detail: LocationDetail | None) -> LocationCoordinate | None:
        """The coordinate the app shows for a detail: lowest id."""
        if detail is None:
            return None
        return (
            self.db.query(LocationCoordinate)
            .filter(LocationCoordinate.location_detail_id == detail.id)
            .order_by(LocationCoordinate.id.asc())
            .first()
        )

    def find_by_key(self, key: str) -> list[LocationDetail]:
        """Exact canonical-key match, newest first."""
        if not key:
            return []
        return (
            self.db.query(LocationDetail)
            .filter(LocationDetail.address_key == key)
            .order_by(LocationDetail.updated_at.desc(), LocationDetail.id.desc())
            .all()
        )

    def find_by_substring(self, text: str, *, limit: int = 10) -> list[LocationDetail]:
        """Case-insensitive substring match on the address, newest first."""
        key = address_key(text)
        if not key:
            return []
        return (
            self.db.query(LocationDetail)
            .filter(LocationDetail.address_key.contains(key, autoescape=True))
            .order_by(LocationDetail.updated_at.desc(), LocationDetail.id.desc())
            .limit(limit)
            .all()
        )

    # --- Favorites ---

    def add_favorite(
        self,
        user_id: str,
        location_detail_id: int,
        *,
        name: str | None = None,
        notes: str | None = None,
    ) -> Favorite:
        row = Favorite(user_id=user_id, location_detail_id=location_detail_id, name=name, notes=notes)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def find_favorites(self, user_id: str, key: str) -> list[Favorite]:
        """Favorites of this user pointing at any detail with this canonical key."""
        if not key:
            return []
        return (
            self.db.query(Favorite)
            .join(LocationDetail, Favorite.location_detail_id == LocationDetail.id)
            .filter(Favorite.user_id == user_id, LocationDetail.address_key == key)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )

    def get_favorite(self, favorite_id: int) -> Favorite | None:
        return self.db.query(Favorite).filter(Favorite.id == favorite_id).first()

    def delete_favorites(self, rows: list[Favorite]) -> int:
        for row in rows:
            self.db.delete(row)
        self.db.commit()
        return len(rows)

    def list_favorites(self, user_id: str) -> list[Favorite]:
        """All favorites for the user, newest first. No limit."""
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )

    # --- Search history ---

    def add_history(self, user_id: str, search_query: str, location_detail_id: int | None) -> SearchHistoryEntry:
        row = SearchHistoryEntry(
            user_id=user_id,
            search_query=search_query,
            location_detail_id=location_detail_id,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def list_history(self, user_id: str, limit: int) -> list[SearchHistoryEntry]:
        """Newest first by searched_at (ties: newest id first)."""
        return (
            self.db.query(SearchHistoryEntry)
            .filter(SearchHistoryEntry.user_id == user_id)
            .order_by(SearchHistoryEntry.searched_at.desc(), SearchHistoryEntry.id.desc())
            .limit(limit)
            .all()
        )

    def prune_history(self, keep_per_user: int) -> int:
        """Delete every history row beyond the newest keep_per_user for each user. Returns rows deleted."""
        keep_per_user = max(0, keep_per_user)
        user_ids = [r[0] for r in self.db.query(SearchHistoryEntry.user_id).distinct().all()]
        deleted = 0
        for uid in user_ids:
            stale_ids = [
                r[0]
                for r in self.db.query(SearchHistoryEntry.id)
                .filter(SearchHistoryEntry.user_id == uid)
                .order_by(SearchHistoryEntry.searched_at.desc(), SearchHistoryEntry.id.desc())
                .offset(keep_per_user)
                .all()
            ]
            if not stale_ids:
                continue
            deleted += (
                self.db.query(SearchHistoryEntry)
                .filter(SearchHistoryEntry.id.in_(stale_ids))
                .delete(synchronize_session=False)
            )
        self.db.commit()
        if deleted:
            logger.info("Pruned %s search history rows (keep %s per user)", deleted, keep_per_user)
        return deleted
