### Description ###
# OrderDesk - Local-first Order Intake
# - Tenant API Router -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Tenant API Endpoints

- GET /tenant - Active client name and storage namespace
- PUT /tenant - Switch to another client (loads or seeds its data)
"""

from fastapi import APIRouter, Depends

from orderdesk.dependencies import get_entity_store
from orderdesk.schemas.responses import APIResponse, TenantResponse, TenantUpdate
from orderdesk.services.entity_store import EntityStore

router = APIRouter()


@router.get(
    "",
    response_model=APIResponse[TenantResponse],
    summary="Get active client",
)
async def get_tenant(store: EntityStore = Depends(get_entity_store)) -> APIResponse[TenantResponse]:
    return APIResponse(data=TenantResponse(name=store.tenant_name, namespace=store.namespace))


@router.put(
    "",
    response_model=APIResponse[TenantResponse],
    summary="Switch client",
    description="Data is stored per client name; switching does not copy data between clients.",
)
async def switch_tenant(
    update: TenantUpdate,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[TenantResponse]:
    store.switch_tenant(update.name)
    return APIResponse(
        message=f"Switched to {store.tenant_name}",
        data=TenantResponse(name=store.tenant_name, namespace=store.namespace),
    )
