"""
Transient notifications.

Holds the latest user-facing message ("Order saved.", "Sync failed: ...")
for a couple of seconds, the way a toast is shown and then disappears.
"""

import time
from dataclasses import dataclass

from orderdesk.utils import get_logger

logger = get_logger(__name__)


@dataclass
class Notification:
    message: str
    created_at: float


class Notifier:
    """Latest-message-wins notification slot with a short lifetime"""

    def __init__(self, ttl_seconds: float = 2.2):
        self.ttl_seconds = ttl_seconds
        self._current: Notification | None = None

    def notify(self, message: str) -> None:
        logger.info(f"Notify: {message}")
        self._current = Notification(message=message, created_at=time.monotonic())

    def current(self) -> str | None:
        """The active message, or None once it has expired"""
        if self._current is None:
            return None
        if time.monotonic() - self._current.created_at > self.ttl_seconds:
            self._current = None
            return None
        return self._current.message

    def clear(self) -> None:
        self._current = None
