"""Favorite toggle, listing and deletion."""

from unittest.mock import Mock

import pytest

from location_finder.core.errors import AuthRequired, FavoriteNotFound
from location_finder.models.favorite import Favorite
from location_finder.models.location_detail import LocationDetail
from location_finder.services.favorites_service import (
    delete_favorite,
    is_favorited,
    list_favorites,
    toggle_favorite,
)
from location_finder.services.location_store import LocationStore
from location_finder.services.types import ResolvedLocation

PARIS = ResolvedLocation(latitude=48.8566, longitude=2.3522, address="Paris", formatted_address="Paris, France")
TOKYO = ResolvedLocation(latitude=35.6586, longitude=139.7454, address="Tokyo Tower", formatted_address="Tokyo Tower, Minato, Japan")


def test_toggle_twice_adds_then_removes(store, db):
    first = toggle_favorite(store, PARIS, "user-1")
    second = toggle_favorite(store, PARIS, "user-1")

    assert first["favorited"] is True
    assert isinstance(first["favorite_id"], int)
    assert second == {"favorited": False, "favorite_id": None}
    assert db.query(Favorite).count() == 0


def test_toggle_without_user_touches_nothing():
    store = Mock(spec=LocationStore)

    with pytest.raises(AuthRequired):
        toggle_favorite(store, PARIS, None)

    assert store.method_calls == []


def test_toggle_creates_detail_and_coordinate_when_missing(store, db):
    result = toggle_favorite(store, PARIS, "user-1", name="Home", notes="croissants")

    detail = db.query(LocationDetail).one()
    assert detail.address == "Paris"
    assert detail.formatted_address == "Paris, France"
    assert detail.user_id == "user-1"
    assert store.first_coordinate(detail).latitude == 48.8566
    fav = db.query(Favorite).one()
    assert fav.id == result["favorite_id"]
    assert fav.location_detail_id == detail.id
    assert (fav.name, fav.notes) == ("Home", "croissants")


def test_toggle_reuses_cached_detail_with_same_canonical_address(store, db):
    cached = store.create_location(address="Paris", latitude=48.8566, longitude=2.3522, formatted_address="Paris, France")
    variant = PARIS.model_copy(update={"address": "  PARIS "})

    toggle_favorite(store, variant, "user-1")

    assert db.query(LocationDetail).count() == 1
    assert db.query(Favorite).one().location_detail_id == cached.id


def test_map_point_favorite_uses_coordinate_label(store, db):
    point = ResolvedLocation.from_map_click(40.7128, -74.006)

    toggle_favorite(store, point, "user-1")

    detail = db.query(LocationDetail).one()
    assert detail.address == "40.712800, -74.006000"
    assert is_favorited(store, point, "user-1") is True


def test_favorites_are_per_user(store):
    toggle_favorite(store, PARIS, "user-1")

    assert is_favorited(store, PARIS, "user-1") is True
    assert is_favorited(store, PARIS, "user-2") is False
    assert toggle_favorite(store, PARIS, "user-2")["favorited"] is True
    assert is_favorited(store, PARIS, None) is False


def test_list_favorites_newest_first_with_nested_location(store):
    toggle_favorite(store, PARIS, "user-1", name="Paris trip")
    toggle_favorite(store, TOKYO, "user-1")
    toggle_favorite(store, PARIS, "user-2")

    items = list_favorites(store, "user-1")

    assert [i["location"]["address"] for i in items] == ["Tokyo Tower", "Paris"]
    paris = items[1]
    assert paris["name"] == "Paris trip"
    assert paris["created_at"]
    assert paris["location"]["latitude"] == 48.8566
    assert paris["location"]["formatted_address"] == "Paris, France"


def test_list_favorites_requires_user(store):
    with pytest.raises(AuthRequired):
        list_favorites(store, None)


def test_delete_favorite_only_for_owner(store, db):
    fav_id = toggle_favorite(store, PARIS, "user-1")["favorite_id"]

    with pytest.raises(FavoriteNotFound):
        delete_favorite(store, fav_id, "user-2")
    with pytest.raises(FavoriteNotFound):
        delete_favorite(store, fav_id + 100, "user-1")

    delete_favorite(store, fav_id, "user-1")
    assert db.query(Favorite).count() == 0
    # detail stays cached for future lookups
    assert db.query(LocationDetail).count() == 1
