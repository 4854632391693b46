"""Selection state: last-issued request wins."""

from location_finder.services.selection_state import SelectionRegistry, SelectionState
from location_finder.services.types import ResolvedLocation

PARIS = ResolvedLocation(latitude=48.8566, longitude=2.3522, address="Paris", formatted_address="Paris, France")
ROME = ResolvedLocation(latitude=41.9028, longitude=12.4964, address="Rome", formatted_address="Roma, Italia")


def test_starts_empty():
    state = SelectionState()
    assert state.current() is None
    assert state.sequence == 0


def test_stale_resolution_does_not_overwrite_newer_one():
    state = SelectionState()
    slow = state.begin()
    fast = state.begin()

    assert state.apply(fast, ROME) is True
    assert state.apply(slow, PARIS) is False
    assert state.current() == ROME
    assert state.sequence == fast


def test_immediate_selection_supersedes_pending_lookup():
    state = SelectionState()
    pending = state.begin()

    assert state.select(PARIS) is True
    assert state.apply(pending, ROME) is False
    assert state.current() == PARIS


def test_map_click_location_uses_coordinate_pair():
    point = ResolvedLocation.from_map_click(37.7749, -122.4194)

    assert point.address == "37.774900, -122.419400"
    assert point.formatted_address == point.address
    assert (point.latitude, point.longitude) == (37.7749, -122.4194)


def test_registry_keeps_one_state_per_session():
    registry = SelectionRegistry()
    registry.get("tab-a").select(PARIS)

    assert registry.get("tab-a").current() == PARIS
    assert registry.get("tab-b").current() is None
    assert registry.get(None) is registry.get("default")
    assert registry.get("  ") is registry.get("default")


def test_registry_evicts_least_recently_used_session():
    registry = SelectionRegistry(max_sessions=2)
    registry.get("tab-a").select(PARIS)
    registry.get("tab-b").select(ROME)
    registry.get("tab-a")  # touch: tab-b is now the oldest

    registry.get("tab-c")

    assert len(registry) == 2
    assert registry.peek("tab-b") is None
    assert registry.peek("tab-a").current() == PARIS


def test_peek_never_creates_state():
    registry = SelectionRegistry()

    assert registry.peek("tab-a") is None
    assert registry.peek(None) is None
    assert len(registry) == 0
