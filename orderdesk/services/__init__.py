### Description ###
# OrderDesk - Local-first Order Intake
# - Services Package -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Services Package

Contains the local data layer:
- entity_store: models, drafts and orders of the active client
- storage: durable JSON key-value store
- patcher: completes stored records with defaults
- query: order filtering and size breakdowns
- export: CSV export
- sync_client: Google Sheets webhook client
"""

from .entity_store import EntityStore, OrderValidationError
from .storage import KeyValueStore
from .sync_client import SyncClient, SyncError

__all__ = [
    "EntityStore",
    "KeyValueStore",
    "OrderValidationError",
    "SyncClient",
    "SyncError",
]
