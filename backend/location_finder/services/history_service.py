"""
Search history: append on every lookup by a signed-in user, list the recent ones, prune the rest.
"""
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from location_finder.core.constants import HISTORY_LIST_LIMIT
from location_finder.core.errors import AuthRequired, MSG_SIGN_IN_HISTORY
from location_finder.services.location_store import LocationStore
from location_finder.services.serializers import location_payload

logger = logging.getLogger(__name__)


def record_search(store: LocationStore, user_id: str | None, query: str, location_detail_id: int | None) -> bool:
    """
    Append a history row for a signed-in user. Anonymous lookups are not recorded.
    A failed write is logged and rolled back; it never fails the lookup that triggered it.
    """
    if not user_id:
        return False
    try:
        store.add_history(user_id, query, location_detail_id)
    except SQLAlchemyError as e:
        logger.warning("Could not save search history for user %s: %s", user_id, e, exc_info=True)
        store.rollback()
        return False
    return True


def list_history(store: LocationStore, user_id: str | None, limit: int = HISTORY_LIST_LIMIT) -> list[dict[str, Any]]:
    """Most recent searches for the user, newest first, never more than HISTORY_LIST_LIMIT."""
    if not user_id:
        raise AuthRequired(MSG_SIGN_IN_HISTORY)
    limit = max(1, min(limit, HISTORY_LIST_LIMIT))
    rows = store.list_history(user_id, limit)
    return [
        {
            "id": r.id,
            "search_query": r.search_query,
            "searched_at": r.searched_at.isoformat() if r.searched_at else None,
            "location": location_payload(store, r.location_detail),
        }
        for r in rows
    ]


def prune_history(store: LocationStore, keep_per_user: int) -> int:
    """Retention: keep the newest keep_per_user rows per user."""
    return store.prune_history(keep_per_user)
