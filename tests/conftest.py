import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.storage import MemoryStore, SupabaseStore, UnavailableStore
from tests.fakes import FakeSupabaseClient

TRIP_UUID = "0b8f2a6e-4d1c-4b7a-9f3e-2c5d6e7f8a9b"
OWNER_UUID = "5f0c9d3a-1b2e-4c3d-8e9f-0a1b2c3d4e5f"


def make_settings(**overrides):
    """Settings isolated from the environment and any .env file"""
    values = {
        "SUPABASE_URL": None,
        "SUPABASE_KEY": None,
        "ENV": "development",
        "ALLOW_MOCK_STORE": True,
        "LOG_LEVEL": "warning",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def memory_store():
    """Fresh mock store with the mock-trip-1 demo rows."""
    return MemoryStore()


@pytest.fixture
def client(settings, memory_store):
    """TestClient around an app backed by a fresh mock store."""
    app = create_app(settings, store=memory_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def production_client():
    """Production app with no database configured."""
    settings = make_settings(ENV="production")
    app = create_app(settings, store=UnavailableStore())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_supabase():
    return FakeSupabaseClient()


@pytest.fixture
def supabase_store(fake_supabase):
    return SupabaseStore(fake_supabase)


@pytest.fixture
def supabase_client(settings, supabase_store):
    """TestClient around an app backed by the fake Supabase tables."""
    app = create_app(settings, store=supabase_store)
    with TestClient(app) as c:
        yield c
