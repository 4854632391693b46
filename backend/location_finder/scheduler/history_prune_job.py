"""
Prune search history: every HISTORY_PRUNE_INTERVAL_MINUTES, keep only the newest
HISTORY_RETENTION_PER_USER rows per user so the table stays bounded.
"""
import logging

from location_finder.config import settings
from location_finder.db.session import SessionLocal
from location_finder.services.history_service import prune_history
from location_finder.services.location_store import LocationStore

logger = logging.getLogger(__name__)


def run_history_prune_job(keep_per_user: int | None = None, session_factory=SessionLocal) -> int:
    keep = settings.history_retention_per_user if keep_per_user is None else keep_per_user
    db = session_factory()
    try:
        deleted = prune_history(LocationStore(db), keep)
        logger.debug("History prune job: deleted %s rows", deleted)
        return deleted
    except Exception as e:
        logger.exception("History prune job failed: %s", e)
        db.rollback()
        return 0
    finally:
        db.close()
