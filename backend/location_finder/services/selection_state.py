"""
Selection state: the one location the search panel, map and details panel all show.

Every resolution takes a ticket from begin() before it starts and hands it back to apply()
when it finishes. Only the most recently issued ticket may change the selection, so a slow
lookup that finishes after a newer one is dropped instead of overwriting it.
"""
import logging
import threading
from collections import OrderedDict

from location_finder.config import settings
from location_finder.core.constants import DEFAULT_MAX_SESSIONS, DEFAULT_SESSION_ID
from location_finder.services.types import ResolvedLocation

logger = logging.getLogger(__name__)


class SelectionState:
    """Current selection for one client session. Safe to share across request threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0
        self._location: ResolvedLocation | None = None

    def begin(self) -> int:
        """Issue the next request sequence number."""
        with self._lock:
            self._issued += 1
            return self._issued

    def apply(self, ticket: int, location: ResolvedLocation) -> bool:
        """Store location if ticket is still the latest issued. Returns whether it was applied."""
        with self._lock:
            if ticket != self._issued:
                logger.debug("Dropping stale selection (ticket %s, latest %s)", ticket, self._issued)
                return False
            self._location = location
            self._applied = ticket
            return True

    def select(self, location: ResolvedLocation) -> bool:
        """Immediate selection (map click, favorite or history pick)."""
        return self.apply(self.begin(), location)

    def current(self) -> ResolvedLocation | None:
        with self._lock:
            return self._location

    @property
    def sequence(self) -> int:
        """Sequence number of the selection currently shown (0 = nothing selected yet)."""
        with self._lock:
            return self._applied


class SelectionRegistry:
    """
    SelectionState per session id. In-memory; one process serves one set of sessions.
    Holds at most max_sessions states; the least recently used session is evicted first.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        self._lock = threading.Lock()
        self._max_sessions = max(1, max_sessions)
        self._states: OrderedDict[str, SelectionState] = OrderedDict()

    @staticmethod
    def _key(session_id: str | None) -> str:
        return (session_id or "").strip() or DEFAULT_SESSION_ID

    def get(self, session_id: str | None) -> SelectionState:
        """State for the session, created on first use (evicting the oldest session when full)."""
        sid = self._key(session_id)
        with self._lock:
            state = self._states.get(sid)
            if state is not None:
                self._states.move_to_end(sid)
                return state
            state = self._states[sid] = SelectionState()
            while len(self._states) > self._max_sessions:
                evicted, _ = self._states.popitem(last=False)
                logger.debug("Evicted selection state for session %r", evicted)
            return state

    def peek(self, session_id: str | None) -> SelectionState | None:
        """Existing state for the session, or None. Never creates one."""
        sid = self._key(session_id)
        with self._lock:
            state = self._states.get(sid)
            if state is not None:
                self._states.move_to_end(sid)
            return state

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)


default_registry = SelectionRegistry(settings.selection_max_sessions)
