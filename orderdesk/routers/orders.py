### Description ###
# OrderDesk - Local-first Order Intake
# - Order API Router -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Order API Endpoints

- GET /orders - Filtered order list (newest first)
- GET /orders/models - Model names used by orders (filter options)
- POST /orders - Submit a new order (auto-synced in the background)
- DELETE /orders/{order_id} - Delete an order
- GET /orders/export - Filtered orders as a CSV download
- POST /orders/sync - Push the filtered orders to Google Sheets
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from orderdesk.dependencies import get_entity_store, get_notifier, get_sync_client
from orderdesk.schemas.order import Order, OrderFilter, OrderInput
from orderdesk.schemas.responses import APIResponse, SyncResponse
from orderdesk.services.entity_store import EntityStore
from orderdesk.services.export import export_filename, to_csv
from orderdesk.services.notifier import Notifier
from orderdesk.services.query import distinct_models, filter_orders
from orderdesk.services.sync_client import SyncClient, SyncError

router = APIRouter()


def order_filter(
    search: str = Query("", description="Search name, email, phone, address, notes, model or size"),
    model: str = Query("", description="Exact model name"),
    size: str = Query("", description="Exact size"),
) -> OrderFilter:
    """Shared filter query parameters"""
    return OrderFilter(text=search, model=model, size=size)


@router.get("", response_model=APIResponse[list[Order]], summary="List orders")
async def list_orders(
    criteria: OrderFilter = Depends(order_filter),
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[list[Order]]:
    return APIResponse(data=filter_orders(store.orders, criteria))


@router.get("/models", response_model=APIResponse[list[str]], summary="Model filter options")
async def list_order_models(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[str]]:
    """Model names that appear on orders, in first-seen order"""
    return APIResponse(data=distinct_models(store.orders))


@router.post(
    "",
    response_model=APIResponse[Order],
    status_code=status.HTTP_201_CREATED,
    summary="Submit order",
    description="Validation failures return 400 and leave the order list unchanged.",
)
async def create_order(
    form: OrderInput,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[Order]:
    order = store.add_order(form)
    return APIResponse(message="Order saved.", data=order)


@router.delete("/{order_id}", response_model=APIResponse[None], summary="Delete order")
async def delete_order(
    order_id: str,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[None]:
    if not store.delete_order(order_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order {order_id} not found",
        )
    return APIResponse(message="Order deleted.")


@router.get("/export", summary="Export orders as CSV", response_class=Response)
async def export_orders(
    criteria: OrderFilter = Depends(order_filter),
    store: EntityStore = Depends(get_entity_store),
) -> Response:
    csv_text = to_csv(filter_orders(store.orders, criteria))
    filename = export_filename(store.tenant_name)
    return Response(
        content=csv_text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/sync", response_model=APIResponse[SyncResponse], summary="Sync filtered orders")
async def sync_orders(
    criteria: OrderFilter = Depends(order_filter),
    store: EntityStore = Depends(get_entity_store),
    sync_client: SyncClient = Depends(get_sync_client),
    notifier: Notifier = Depends(get_notifier),
) -> APIResponse[SyncResponse]:
    orders = filter_orders(store.orders, criteria)
    try:
        body = await sync_client.push_orders(orders)
    except SyncError as e:
        notifier.notify(str(e))
        raise

    notifier.notify("Orders synced.")
    return APIResponse(message="Orders synced.", data=SyncResponse(synced=len(orders), response=body))
