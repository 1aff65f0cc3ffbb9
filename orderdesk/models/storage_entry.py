### Description ###
# OrderDesk - Local-first Order Intake
# - Storage Entry Model -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Storage Entry Model

A single key of the local key-value store. Keys look like
"bolos-crew.models", "bolos-crew.orders" or "tenantName"; values are
JSON text and are always rewritten whole.
"""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from orderdesk.database import Base


class StorageEntry(Base):
    """Key/value row holding one JSON document"""

    __tablename__ = "storage_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StorageEntry(key='{self.key}', size={len(self.value or '')})>"
