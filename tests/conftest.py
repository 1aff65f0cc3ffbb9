"""
Shared pytest fixtures for OrderDesk tests.

Provides:
- Isolated SQLite key-value store per test
- Entity store with a mocked sync client
- FastAPI TestClient with dependency overrides
"""

import os
import tempfile

# Keep tests away from the real data/ folder and log files
_TEST_DIR = tempfile.mkdtemp(prefix="orderdesk-tests-")
os.environ.setdefault("ORDERDESK_LOG_TO_FILE", "false")
os.environ.setdefault("ORDERDESK_CONFIG_PATH", os.path.join(_TEST_DIR, "config.yaml"))
os.environ.setdefault("ORDERDESK_DATABASE_URL", f"sqlite:///{os.path.join(_TEST_DIR, 'orderdesk.db')}")

from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from orderdesk.database import create_db_engine, create_session_factory, drop_db, init_db  # noqa: E402
from orderdesk.dependencies import get_config, get_entity_store, get_notifier, get_sync_client  # noqa: E402
from orderdesk.main import app  # noqa: E402
from orderdesk.services.config_service import ConfigService  # noqa: E402
from orderdesk.services.entity_store import EntityStore  # noqa: E402
from orderdesk.services.notifier import Notifier  # noqa: E402
from orderdesk.services.storage import KeyValueStore  # noqa: E402

from tests.mocks.mock_sync_client import create_mock_sync_client  # noqa: E402


# ============================================
# Storage Fixtures
# ============================================


@pytest.fixture(scope="function")
def test_engine(tmp_path):
    """
    Create an isolated SQLite database engine for each test.

    Uses a file-based database in tmp_path to avoid connection isolation
    issues with in-memory SQLite.
    """
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def kv_store(test_engine) -> KeyValueStore:
    """Key-value store backed by the per-test database"""
    return KeyValueStore(create_session_factory(test_engine))


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def mock_sync_client(notifier):
    """
    Mock SyncClient that is configured for auto-sync.

    Configure failures in your test:
        mock_sync_client.push_orders = AsyncMock(side_effect=SyncError("..."))
    """
    return create_mock_sync_client(notifier=notifier)


@pytest.fixture
def entity_store(kv_store, mock_sync_client, notifier) -> EntityStore:
    """Entity store opened on the default client (seeded models, no orders)"""
    store = EntityStore(kv_store, sync_client=mock_sync_client, notifier=notifier)
    store.open()
    return store


@pytest.fixture
def config_service(tmp_path) -> ConfigService:
    """Config service writing to a fresh config.yaml in tmp_path"""
    return ConfigService(tmp_path / "config.yaml")


# ============================================
# API Fixtures
# ============================================


@pytest.fixture
def client(
    entity_store: EntityStore,
    mock_sync_client,
    notifier: Notifier,
    config_service: ConfigService,
) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient with every service dependency overridden.

    Uses the per-test entity store and config file instead of the real ones.
    """
    app.dependency_overrides[get_entity_store] = lambda: entity_store
    app.dependency_overrides[get_sync_client] = lambda: mock_sync_client
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_config] = lambda: config_service

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================
# Convenience Fixtures
# ============================================


@pytest.fixture
def sample_orders():
    """Return sample order records for tests."""
    from tests.fixtures.data import SAMPLE_ORDERS

    return [dict(order) for order in SAMPLE_ORDERS]


@pytest.fixture
def legacy_orders():
    """Return stored orders written by older versions (missing fields)."""
    from tests.fixtures.data import LEGACY_ORDERS

    return [dict(order) for order in LEGACY_ORDERS]
