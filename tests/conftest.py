"""
Global pytest fixtures for the user service test suite.

Responsibilities:
    - Provide a fresh FastAPI app and TestClient via the app factory
    - Pin the auth clock so bearer tokens are deterministic
    - Provide an ApiClient wired to the in-process app (TestClient is an httpx.Client)

Why a fixed clock?
    The expected token changes every minute. Pinning "now" removes the chance
    of a test straddling a minute boundary.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from auth.service import current_minute_token
from main import create_app
from usersvc.client import ApiClient
from usersvc.provider_states import SALLY, sally_exists
from usersvc.storage.storage import UserStore

FIXED_NOW = datetime(2024, 1, 1, 12, 30, 15)
FIXED_TOKEN = current_minute_token(FIXED_NOW)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def sally():
    return SALLY


@pytest.fixture
def store() -> UserStore:
    """Fresh store seeded with sally."""
    return sally_exists()


@pytest.fixture
def app(store):
    """App wired to the `store` fixture and the fixed clock."""
    return create_app(store=store, clock=fixed_clock)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def token() -> str:
    """Token valid at FIXED_NOW, e.g. "2024-01-01T12:30"."""
    return FIXED_TOKEN


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api_client(client) -> ApiClient:
    """ApiClient talking to the in-process app, no token attached yet."""
    return ApiClient("http://testserver", http_client=client)
