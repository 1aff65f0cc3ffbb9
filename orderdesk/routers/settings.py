### Description ###
# OrderDesk - Local-first Order Intake
# - Settings API Router -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Settings API Endpoints

- GET /settings - Editable configuration (tenant default, sync, logging)
- PATCH /settings - Validate, save to config.yaml and apply sync changes
"""

from fastapi import APIRouter, Body, Depends, HTTPException, status

from orderdesk.dependencies import get_config, get_sync_client
from orderdesk.schemas.responses import APIResponse
from orderdesk.services.config_service import ConfigService
from orderdesk.services.sync_client import SyncClient
from orderdesk.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=APIResponse[dict], summary="Get settings")
async def get_settings(config: ConfigService = Depends(get_config)) -> APIResponse[dict]:
    return APIResponse(data=config.get_editable_config())


@router.patch("", response_model=APIResponse[dict], summary="Update settings")
async def update_settings(
    updates: dict = Body(..., description="Partial settings, same shape as GET /settings"),
    config: ConfigService = Depends(get_config),
    sync_client: SyncClient = Depends(get_sync_client),
) -> APIResponse[dict]:
    errors = config.validate_update(updates)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )

    changed = config.update_from_dict(updates)
    if changed:
        config.save()
        logger.info(f"Settings updated: {', '.join(changed)}")

    if any(path.startswith("sync.") for path in changed):
        await sync_client.reconfigure(
            webhook_url=config.get("sync.webhook_url", ""),
            timeout=config.get("sync.timeout", 30),
            auto_sync=config.get("sync.auto_sync", True),
        )

    return APIResponse(
        message=f"Updated {len(changed)} setting(s)" if changed else "No changes",
        data=config.get_editable_config(),
    )
