# OrderDesk - API Server
# Copyright (c) 2025-2026 Axiom-Labs. All Rights Reserved.
# See LICENSE file for details.

"""
OrderDesk API - Main Application

FastAPI application that exposes the local data layer:
- Client (tenant) switching
- Product models with staged edits
- Orders, CSV export and Google Sheets sync
- Per-model size breakdown

Usage:
    # Development
    uvicorn orderdesk.main:app --reload --port 8000

    # Or through the CLI
    orderdesk serve
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orderdesk.config import get_app_settings
from orderdesk.dependencies import close_services, get_entity_store, get_sync_client
from orderdesk.middleware import RequestLoggingMiddleware
from orderdesk.routers import (
    models_router,
    orders_router,
    settings_router,
    summary_router,
    tenant_router,
)
from orderdesk.schemas.responses import ErrorResponse, HealthResponse
from orderdesk.services.entity_store import EntityStore, OrderValidationError
from orderdesk.services.namespace import TENANT_NAME_KEY
from orderdesk.services.sync_client import SyncClient, SyncError
from orderdesk.utils import get_logger

# Load settings
settings = get_app_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    - Startup: open the local store and load the last used client
    - Shutdown: let background syncs finish, close the HTTP client
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    store = app.dependency_overrides.get(get_entity_store, get_entity_store)()
    logger.info(f"Active client: {store.tenant_name} (namespace '{store.namespace}')")

    yield

    logger.info("Shutting down OrderDesk API...")
    await close_services()


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
## OrderDesk API

Local-first order intake for small apparel runs.

### Features
- **Models**: Garment variants with availability and preview images
- **Orders**: Per-client order capture, search and CSV export
- **Summary**: Quantity per model and size
- **Sync**: Best-effort push of orders to a Google Sheets webhook
    """,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(OrderValidationError)
async def order_validation_handler(request: Request, exc: OrderValidationError) -> JSONResponse:
    """Missing model or name on order submission"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error=str(exc),
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(),
    )


@app.exception_handler(SyncError)
async def sync_error_handler(request: Request, exc: SyncError) -> JSONResponse:
    """Webhook missing, unreachable or failing"""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=ErrorResponse(
            error=str(exc),
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            details=[{"message": str(exc)}] if settings.debug else None,
        ).model_dump(),
    )


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check",
)
async def health_check(
    store: EntityStore = Depends(get_entity_store),
    sync_client: SyncClient = Depends(get_sync_client),
) -> HealthResponse:
    """Local storage reachability and sync configuration"""
    storage_connected = True
    try:
        store.storage.get(None, TENANT_NAME_KEY)
    except Exception as e:
        logger.error(f"Storage check failed: {e}")
        storage_connected = False

    return HealthResponse(
        status="healthy" if storage_connected else "degraded",
        version=settings.api_version,
        tenant=store.tenant_name,
        storage_connected=storage_connected,
        sync_configured=sync_client.is_configured,
    )


@app.get("/", tags=["System"], summary="API Info")
async def root():
    """API root - returns basic API information"""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "docs": "/api/docs",
        "health": "/health",
    }


app.include_router(tenant_router, prefix=f"{settings.api_prefix}/tenant", tags=["Tenant"])
app.include_router(models_router, prefix=f"{settings.api_prefix}/models", tags=["Models"])
app.include_router(orders_router, prefix=f"{settings.api_prefix}/orders", tags=["Orders"])
app.include_router(summary_router, prefix=settings.api_prefix, tags=["Summary"])
app.include_router(settings_router, prefix=f"{settings.api_prefix}/settings", tags=["Settings"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "orderdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
