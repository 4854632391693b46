"""Cache-first resolution: validation, cache precedence, write-back, failures."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from conftest import PARIS_RESULT, FakeGeocoder
from location_finder.core.errors import GeocodingFailure, LocationNotFound, QueryValidationError
from location_finder.models.location_detail import LocationDetail
from location_finder.models.search_history import SearchHistoryEntry
from location_finder.services.geocode_resolver import GeocodeResolver
from location_finder.services.geocoding import GeocodingClient
from location_finder.services.location_store import LocationStore
from location_finder.services.types import ResolvedLocation


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_blank_query_never_touches_store_or_network(query):
    store = Mock(spec=LocationStore)
    client = Mock(spec=GeocodingClient)

    with pytest.raises(QueryValidationError):
        GeocodeResolver(store, client).resolve(query, "user-1")

    assert store.method_calls == []
    assert client.method_calls == []


def test_cache_miss_geocodes_and_stores_detail_with_coordinate(store, db):
    fake = FakeGeocoder([PARIS_RESULT])

    result = GeocodeResolver(store, fake.client()).resolve("Paris")

    assert result == ResolvedLocation(
        latitude=48.8566, longitude=2.3522, address="Paris", formatted_address="Paris, France"
    )
    assert fake.calls == 1
    details = db.query(LocationDetail).all()
    assert len(details) == 1
    detail = details[0]
    assert detail.address == "Paris"
    assert detail.address_key == "paris"
    assert detail.formatted_address == "Paris, France"
    assert detail.display_name == "Paris, France"
    assert detail.place_type == "city"
    assert detail.city == "Paris"
    assert detail.user_id is None
    coord = store.first_coordinate(detail)
    assert (coord.latitude, coord.longitude) == (48.8566, 2.3522)
    assert coord.accuracy == 0.92


def test_substring_cache_hit_skips_geocoder(store):
    store.create_location(
        address="Eiffel Tower, Paris",
        latitude=48.8584,
        longitude=2.2945,
        formatted_address="Tour Eiffel, Avenue Gustave Eiffel, Paris, France",
    )
    fake = FakeGeocoder([PARIS_RESULT])

    result = GeocodeResolver(store, fake.client()).resolve("eiffel TOWER")

    assert fake.calls == 0
    assert result.latitude == 48.8584
    assert result.longitude == 2.2945
    assert result.address == "Eiffel Tower, Paris"
    assert result.formatted_address == "Tour Eiffel, Avenue Gustave Eiffel, Paris, France"


def test_second_lookup_is_served_from_cache(store):
    fake = FakeGeocoder([PARIS_RESULT])
    resolver = GeocodeResolver(store, fake.client())

    first = resolver.resolve("Paris")
    second = resolver.resolve("  paris ")

    assert fake.calls == 1
    assert second.latitude == first.latitude
    assert second.address == "Paris"


def test_exact_key_match_wins_over_newer_substring_match(store):
    exact = store.create_location(address="Springfield", latitude=39.78, longitude=-89.65)
    store.create_location(address="Springfield, Massachusetts", latitude=42.10, longitude=-72.59)
    fake = FakeGeocoder([PARIS_RESULT])

    result = GeocodeResolver(store, fake.client()).resolve("springfield")

    assert fake.calls == 0
    assert result.address == exact.address
    assert result.latitude == 39.78


def test_cached_detail_without_coordinate_is_a_miss(store, db):
    db.add(LocationDetail(address="Paris", address_key="paris"))
    db.commit()
    fake = FakeGeocoder([PARIS_RESULT])

    result = GeocodeResolver(store, fake.client()).resolve("Paris")

    assert fake.calls == 1
    assert result.formatted_address == "Paris, France"


def test_empty_provider_result_is_not_found_and_writes_nothing(store, db):
    fake = FakeGeocoder([])

    with pytest.raises(LocationNotFound):
        GeocodeResolver(store, fake.client()).resolve("Xyzzyville", "user-1")

    assert db.query(LocationDetail).count() == 0
    assert db.query(SearchHistoryEntry).count() == 0


def test_provider_error_is_a_failure(store, db):
    fake = FakeGeocoder({"error": "down"}, status_code=500)

    with pytest.raises(GeocodingFailure):
        GeocodeResolver(store, fake.client()).resolve("Paris")

    assert fake.calls == 1
    assert db.query(LocationDetail).count() == 0


def test_signed_in_lookup_records_history_on_miss_and_hit(store, db):
    resolver = GeocodeResolver(store, FakeGeocoder([PARIS_RESULT]).client())

    resolver.resolve("Paris", "user-1")
    resolver.resolve("paris", "user-1")

    rows = db.query(SearchHistoryEntry).order_by(SearchHistoryEntry.id).all()
    assert [r.search_query for r in rows] == ["Paris", "paris"]
    assert {r.user_id for r in rows} == {"user-1"}
    detail = db.query(LocationDetail).one()
    assert {r.location_detail_id for r in rows} == {detail.id}
    assert detail.user_id == "user-1"


def test_anonymous_lookup_records_no_history(store, db):
    GeocodeResolver(store, FakeGeocoder([PARIS_RESULT]).client()).resolve("Paris")

    assert db.query(SearchHistoryEntry).count() == 0


class BrokenWriteStore(LocationStore):
    def create_location(self, **kwargs):
        raise SQLAlchemyError("database is read-only")


def test_failed_cache_write_still_returns_coordinates(db):
    store = BrokenWriteStore(db)

    result = GeocodeResolver(store, FakeGeocoder([PARIS_RESULT]).client()).resolve("Paris", "user-1")

    assert (result.latitude, result.longitude) == (48.8566, 2.3522)
    assert result.formatted_address == "Paris, France"
    assert db.query(SearchHistoryEntry).count() == 0
