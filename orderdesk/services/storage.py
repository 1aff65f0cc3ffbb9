### Description ###
# OrderDesk - Local-first Order Intake
# - Key-Value Storage Service -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Key-Value Storage Service

Durable JSON storage addressed by (namespace, name). A namespaced entry is
stored under "<namespace>.<name>"; a global entry (namespace=None) is stored
under its bare name. Every write replaces the whole value in its own
transaction, so readers only ever see the last completed write.
"""

import json
from typing import Any

from sqlalchemy.orm import sessionmaker

from orderdesk.models import StorageEntry
from orderdesk.utils import get_logger

logger = get_logger(__name__)


def storage_key(namespace: str | None, name: str) -> str:
    """Physical key for a (namespace, name) pair"""
    if namespace is None:
        return name
    return f"{namespace}.{name}"


class KeyValueStore:
    """
    SQLite-backed key-value store.

    Values are encoded as JSON text. Unreadable values are reported as
    missing so callers fall back to their defaults.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, namespace: str | None, name: str, default: Any = None) -> Any:
        """
        Read and decode a value.

        Args:
            namespace: Tenant namespace key, or None for a global entry
            name: Entry name within the namespace (e.g. "orders")
            default: Returned when the entry is missing or not valid JSON

        Returns:
            Decoded JSON value or default
        """
        key = storage_key(namespace, name)
        with self._session_factory() as db:
            entry = db.get(StorageEntry, key)
            raw = entry.value if entry is not None else None

        if raw is None:
            return default
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable value for '{key}': {e}")
            return default

    def set(self, namespace: str | None, name: str, value: Any) -> None:
        """Encode and write a value, replacing whatever was stored"""
        key = storage_key(namespace, name)
        payload = json.dumps(value, ensure_ascii=False)

        with self._session_factory() as db:
            entry = db.get(StorageEntry, key)
            if entry is None:
                db.add(StorageEntry(key=key, value=payload))
            else:
                entry.value = payload
            db.commit()

        logger.debug(f"Wrote {len(payload)} bytes to '{key}'")
