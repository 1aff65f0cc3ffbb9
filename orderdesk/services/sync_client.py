### Description ###
# OrderDesk - Local-first Order Intake
# - Google Sheets Sync Client -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Google Sheets Sync Client

Pushes orders to a Google Apps Script webhook as JSON:

    {"type": "order",  "order":  {...}}     one new order
    {"type": "orders", "orders": [...]}     a filtered selection

Sync is best-effort. A failed push is reported and forgotten: nothing is
retried and the local data that triggered it is never rolled back.
"""

import asyncio
from collections.abc import Iterable
from typing import Any

import httpx

from orderdesk.schemas.order import Order
from orderdesk.services.notifier import Notifier
from orderdesk.utils import get_logger

logger = get_logger(__name__)

NO_WEBHOOK_MESSAGE = "Add a Google Sheets webhook in Settings."


class SyncError(Exception):
    """Raised when the webhook is missing, unreachable or answers with a non-2xx status"""

    pass


class SyncClient:
    """
    HTTP client for the Google Sheets webhook.

    Uses connection pooling; call close() on shutdown.
    """

    def __init__(
        self,
        webhook_url: str = "",
        timeout: int = 30,
        auto_sync: bool = True,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the sync client.

        Args:
            webhook_url: Apps Script web app URL (empty disables sync)
            timeout: Request timeout in seconds
            auto_sync: Push each new order as soon as it is saved
            notifier: Receives the outcome of background pushes
            transport: Custom httpx transport (tests)
        """
        self.webhook_url = webhook_url.strip()
        self.timeout = timeout
        self.auto_sync = auto_sync
        self.notifier = notifier
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"Content-Type": "application/json"},
                # Apps Script answers POSTs with a redirect to the result
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def reconfigure(self, webhook_url: str, timeout: int, auto_sync: bool) -> None:
        """Apply new settings; the next request opens a fresh connection"""
        await self.close()
        self.webhook_url = webhook_url.strip()
        self.timeout = timeout
        self.auto_sync = auto_sync
        logger.info(f"Sync configured: url={'set' if self.webhook_url else 'none'}, auto_sync={auto_sync}")

    async def _post(self, payload: dict[str, Any]) -> Any:
        """
        POST a payload to the webhook.

        Returns:
            Parsed JSON response body, or {} if the body is not JSON

        Raises:
            SyncError: On missing webhook, transport failure or non-2xx status
        """
        if not self.webhook_url:
            raise SyncError(NO_WEBHOOK_MESSAGE)

        try:
            client = await self._get_client()
            response = await client.post(self.webhook_url, json=payload)
        except httpx.TimeoutException as e:
            raise SyncError(f"Sync request timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SyncError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise SyncError(f"Sync failed: {response.status_code} {response.reason_phrase}")

        try:
            return response.json()
        except ValueError:
            return {}

    async def push_order(self, order: Order) -> Any:
        """Push a single new order"""
        logger.info(f"Syncing order {order.id}")
        return await self._post({"type": "order", "order": order.to_record()})

    async def push_orders(self, orders: Iterable[Order]) -> Any:
        """Push a selection of orders in one request"""
        records = [order.to_record() for order in orders]
        logger.info(f"Syncing {len(records)} order(s)")
        return await self._post({"type": "orders", "orders": records})

    def dispatch_order(self, order: Order) -> asyncio.Task | None:
        """
        Push an order in the background without waiting for the result.

        The outcome only reaches the notifier. Returns the task, or None when
        there is no running event loop to schedule it on.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop; order {order.id} was not synced")
            return None

        task = loop.create_task(self._push_and_report(order))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _push_and_report(self, order: Order) -> None:
        try:
            await self.push_order(order)
        except SyncError as e:
            logger.warning(f"Order {order.id} not synced: {e}")
            self._notify(str(e))
            return
        self._notify("Synced to Google Sheets.")

    def _notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier.notify(message)

    async def drain(self) -> None:
        """Wait for background pushes that are still in flight"""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
