"""
Pytest configuration and fixtures.

Provides a test client wired to fake upstream HTTP and fresh session storage,
plus a study service with a seeded random source.
"""

import random

import pytest
from fastapi.testclient import TestClient

from proofmaster.catalog import default_catalog
from proofmaster_api.core.config import Settings, get_settings
from proofmaster_api.main import app, get_http_session
from proofmaster_api.repositories import InMemorySessionRepository, get_session_repository
from proofmaster_api.services import StudyService


class FakeResponse:
    """Just enough of requests.Response for the proxy"""

    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class FakeUpstream:
    """Stands in for requests.Session; records every call"""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(200, "42")
        self.error = None

    def respond(self, status_code: int, text: str) -> None:
        self.response = FakeResponse(status_code, text)

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def test_settings() -> Settings:
    return Settings(WOLFRAM_APP_ID="test-app-id", MAX_SESSIONS=5, DEBUG=False)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository(max_sessions=5)


@pytest.fixture
def client(test_settings, upstream, repository) -> TestClient:
    """FastAPI test client"""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_session] = lambda: upstream
    app.dependency_overrides[get_session_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client) -> str:
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(repository, test_settings, clock) -> StudyService:
    """Study service over the bundled catalog with seeded randomness"""
    return StudyService(
        repository,
        default_catalog(),
        test_settings,
        rng=random.Random(7),
        clock=clock,
    )
