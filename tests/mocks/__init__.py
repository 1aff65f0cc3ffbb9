"""
Mock implementations for testing.

Provides mocks for external dependencies:
- SyncClient: HTTP client for the Google Sheets webhook
"""

from tests.mocks.mock_sync_client import create_mock_sync_client

__all__ = [
    "create_mock_sync_client",
]
