### Description ###
# OrderDesk - Local-first Order Intake
# - Storage Models Package -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Storage Models Package

Contains SQLAlchemy models for the local database:
- StorageEntry: one JSON-encoded value per storage key
"""

from orderdesk.models.storage_entry import StorageEntry

__all__ = [
    "StorageEntry",
]
