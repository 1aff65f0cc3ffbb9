### Description ###
# OrderDesk - Local-first Order Intake
# - Mockup Attachments -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Mockup Attachments

Reads image files into base64 data URLs. Several files can be read at once;
an order can only be submitted after every pending read has finished.
"""

import asyncio
import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from orderdesk.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Attachment:
    """An uploaded file embedded as a data URL"""

    name: str
    data: str


def encode_data_url(content: bytes, content_type: str | None = None) -> str:
    """Encode bytes as data:<type>;base64,<payload>"""
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{content_type or 'application/octet-stream'};base64,{payload}"


def read_attachment(path: str | Path) -> Attachment:
    """Read one file from disk into an Attachment"""
    path = Path(path)
    content_type, _ = mimetypes.guess_type(path.name)
    data = encode_data_url(path.read_bytes(), content_type)
    logger.debug(f"Read attachment {path.name} ({len(data)} chars)")
    return Attachment(name=path.name, data=data)


class PendingAttachments:
    """
    Attachment reads in flight.

    Each add() starts a read immediately; resolved() waits for all of them.
    Reads may finish in any order; results keep the order they were added in.
    """

    def __init__(self):
        self._tasks: list[asyncio.Task] = []

    def add(self, path: str | Path) -> asyncio.Task:
        """Start reading a file (must be called from a running event loop)"""
        task = asyncio.create_task(asyncio.to_thread(read_attachment, path))
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> int:
        """Number of reads that have not finished yet"""
        return sum(1 for task in self._tasks if not task.done())

    async def resolved(self) -> list[Attachment]:
        """
        Wait for every read and return the attachments.

        Raises:
            OSError: If any file could not be read
        """
        return list(await asyncio.gather(*self._tasks))
