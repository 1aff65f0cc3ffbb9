### Description ###
# OrderDesk - Local-first Order Intake
# - Model API Router -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Model API Endpoints

Committed models are read-only here; edits go to a draft list that is
either saved as a whole or reset:
- GET /models - Committed models
- GET /models/available - Models shown in the new-order form
- GET /models/draft - Draft models
- POST /models/draft - Add a draft model
- PATCH /models/draft/{model_id} - Edit a draft model
- DELETE /models/draft/{model_id} - Remove a draft model
- POST /models/draft/reset - Discard draft edits
- POST /models/save - Commit the drafts
"""

from fastapi import APIRouter, Depends, HTTPException, status

from orderdesk.dependencies import get_entity_store
from orderdesk.schemas.model import Model, ModelCreate, ModelUpdate
from orderdesk.schemas.responses import APIResponse
from orderdesk.services.entity_store import EntityStore

router = APIRouter()


def _not_found(model_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Model {model_id} not found",
    )


@router.get("", response_model=APIResponse[list[Model]], summary="List models")
async def list_models(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[Model]]:
    return APIResponse(data=store.models)


@router.get("/available", response_model=APIResponse[list[Model]], summary="List available models")
async def list_available_models(
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[list[Model]]:
    return APIResponse(data=store.available_models())


@router.get("/draft", response_model=APIResponse[list[Model]], summary="List draft models")
async def list_draft_models(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[Model]]:
    return APIResponse(data=store.draft_models)


@router.post(
    "/draft",
    response_model=APIResponse[Model],
    status_code=status.HTTP_201_CREATED,
    summary="Add draft model",
)
async def add_draft_model(
    body: ModelCreate | None = None,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[Model]:
    model = store.add_draft_model((body or ModelCreate()).name)
    return APIResponse(data=model)


@router.patch("/draft/{model_id}", response_model=APIResponse[Model], summary="Edit draft model")
async def update_draft_model(
    model_id: str,
    update: ModelUpdate,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[Model]:
    try:
        model = store.update_draft_model(
            model_id,
            name=update.name,
            available=update.available,
            image=update.image,
        )
    except KeyError as e:
        raise _not_found(model_id) from e
    return APIResponse(data=model)


@router.delete("/draft/{model_id}", response_model=APIResponse[list[Model]], summary="Remove draft model")
async def remove_draft_model(
    model_id: str,
    store: EntityStore = Depends(get_entity_store),
) -> APIResponse[list[Model]]:
    try:
        store.remove_draft_model(model_id)
    except KeyError as e:
        raise _not_found(model_id) from e
    return APIResponse(data=store.draft_models)


@router.post("/draft/reset", response_model=APIResponse[list[Model]], summary="Discard draft edits")
async def reset_draft_models(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[Model]]:
    store.reset_drafts()
    return APIResponse(data=store.draft_models)


@router.post("/save", response_model=APIResponse[list[Model]], summary="Save draft models")
async def save_models(store: EntityStore = Depends(get_entity_store)) -> APIResponse[list[Model]]:
    models = store.save_models()
    return APIResponse(message="Models saved.", data=models)
