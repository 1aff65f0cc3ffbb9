"""
Summary API Endpoints

- GET /summary - Per-model size breakdown of all orders
- GET /notifications - Current transient notification
"""

from fastapi import APIRouter, Depends

from orderdesk.dependencies import get_entity_store, get_notifier
from orderdesk.schemas.order import BreakdownRow
from orderdesk.schemas.responses import APIResponse, NotificationResponse
from orderdesk.services.entity_store import EntityStore
from orderdesk.services.notifier import Notifier
from orderdesk.services.query import breakdown_rows

router = APIRouter()


@router.get("/summary", response_model=APIResponse[list[BreakdownRow]], summary="Size breakdown")
async def get_summary(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[BreakdownRow]]:
    return APIResponse(data=breakdown_rows(store.orders))


@router.get("/notifications", response_model=APIResponse[NotificationResponse], summary="Current notification")
async def get_notification(notifier: Notifier = Depends(get_notifier)) -> APIResponse[NotificationResponse]:
    return APIResponse(data=NotificationResponse(message=notifier.current()))
