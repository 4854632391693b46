"""Shared pytest fixtures: in-memory database, fake geocoding API, API client, tokens."""

import os
import time

# Settings are read at import time; point them at test values before importing the app.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_JWT_SECRET"] = "test-secret-for-hs256-signing-only"
os.environ["AUTH_JWT_AUDIENCE"] = "authenticated"
os.environ["SCHEDULER_ENABLED"] = "false"

import httpx
import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from location_finder import models  # noqa: F401
from location_finder.api.deps import get_geocoding_client, get_selection_registry
from location_finder.db.base import Base
from location_finder.db.session import get_db
from location_finder.main import app
from location_finder.services.geocoding import GeocodingClient, GeocodingConfig
from location_finder.services.location_store import LocationStore
from location_finder.services.selection_state import SelectionRegistry

TEST_SECRET = "test-secret-for-hs256-signing-only"

PARIS_RESULT = {
    "lat": "48.8566",
    "lon": "2.3522",
    "display_name": "Paris, France",
    "type": "city",
    "importance": 0.92,
    "address": {"city": "Paris", "state": "Ile-de-France", "country": "France", "postcode": "75000"},
}


class FakeGeocoder:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, payload=None, status_code: int = 200, error: Exception | None = None):
        self.payload = [] if payload is None else payload
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def client(self) -> GeocodingClient:
        config = GeocodingConfig(base_url="https://geocoder.test", user_agent="LocationFinder/1.0", timeout=5.0)
        return GeocodingClient(config, transport=httpx.MockTransport(self))


def make_token(sub: str = "user-1", *, secret: str = TEST_SECRET, expires_in: int = 3600, **claims) -> str:
    payload = {"sub": sub, "aud": "authenticated", "exp": int(time.time()) + expires_in, **claims}
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers(sub: str = "user-1") -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(sub)}"}


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return LocationStore(db)


@pytest.fixture
def paris_geocoder():
    return FakeGeocoder([PARIS_RESULT])


@pytest.fixture
def api(session_factory, paris_geocoder):
    """TestClient wired to the in-memory database, the fake geocoder and a fresh selection registry."""

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    registry = SelectionRegistry()
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_geocoding_client] = paris_geocoder.client
    app.dependency_overrides[get_selection_registry] = lambda: registry
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
