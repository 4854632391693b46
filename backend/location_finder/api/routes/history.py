"""Search history API: the signed-in user's most recent searches."""
from typing import Any

from fastapi import APIRouter, Depends, Query

from location_finder.api.deps import get_store, get_user_id
from location_finder.core.constants import HISTORY_LIST_LIMIT
from location_finder.services.history_service import list_history
from location_finder.services.location_store import LocationStore

router = APIRouter()


@router.get("")
def list_recent(
    store: LocationStore = Depends(get_store),
    user_id: str | None = Depends(get_user_id),
    limit: int = Query(HISTORY_LIST_LIMIT, ge=1, le=HISTORY_LIST_LIMIT),
) -> list[dict[str, Any]]:
    """Newest first, at most 20 entries."""
    return list_history(store, user_id, limit=limit)
