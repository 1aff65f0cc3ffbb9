### Description ###
# OrderDesk - Local-first Order Intake
# - FastAPI Dependencies -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
FastAPI Dependencies

Provides dependency injection for:
- Entity store (models and orders of the active client)
- Google Sheets sync client
- Notifications
- Configuration service
"""

from orderdesk.config import DEFAULT_TENANT_NAME, DEFAULT_WEBHOOK_URL
from orderdesk.database import DATABASE_URL, create_db_engine, create_session_factory, init_db
from orderdesk.services.config_service import ConfigService, get_config_service
from orderdesk.services.entity_store import EntityStore
from orderdesk.services.notifier import Notifier
from orderdesk.services.storage import KeyValueStore
from orderdesk.services.sync_client import SyncClient

# Service instances (created on first request, reused)
_notifier: Notifier | None = None
_sync_client: SyncClient | None = None
_entity_store: EntityStore | None = None


def get_notifier() -> Notifier:
    """Dependency that provides the shared notification slot"""
    global _notifier
    if _notifier is None:
        _notifier = Notifier()
    return _notifier


def get_sync_client() -> SyncClient:
    """
    Dependency that provides the Google Sheets sync client.

    Webhook URL, timeout and auto-sync come from config.yaml (sync section).
    """
    global _sync_client
    if _sync_client is None:
        config = get_config_service()
        _sync_client = SyncClient(
            webhook_url=config.get("sync.webhook_url", DEFAULT_WEBHOOK_URL) or "",
            timeout=config.get("sync.timeout", 30),
            auto_sync=config.get("sync.auto_sync", True),
            notifier=get_notifier(),
        )
    return _sync_client


def get_entity_store() -> EntityStore:
    """
    Dependency that provides the entity store.

    Opens the local database on first use and loads the last used client.
    """
    global _entity_store
    if _entity_store is None:
        engine = create_db_engine(DATABASE_URL)
        init_db(engine)
        config = get_config_service()
        _entity_store = EntityStore(
            KeyValueStore(create_session_factory(engine)),
            sync_client=get_sync_client(),
            notifier=get_notifier(),
            default_tenant=config.get("tenant.default_name", DEFAULT_TENANT_NAME),
        )
        _entity_store.open()
    return _entity_store


def get_config() -> ConfigService:
    """Dependency that provides the config service"""
    return get_config_service()


async def close_services() -> None:
    """Finish in-flight syncs and close the HTTP client (call on shutdown)"""
    global _sync_client, _entity_store

    if _sync_client is not None:
        await _sync_client.drain()
        await _sync_client.close()
        _sync_client = None

    _entity_store = None
