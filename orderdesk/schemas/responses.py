### Description ###
# OrderDesk - Local-first Order Intake
# - Common Response Schemas -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Common Response Schemas

Pydantic models for standardized API responses.
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper"""

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorDetail(BaseModel):
    """Error detail for validation errors"""

    field: Optional[str] = None
    message: str
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response"""

    success: bool = False
    error: str
    details: Optional[List[ErrorDetail]] = None
    request_id: Optional[str] = None


class TenantResponse(BaseModel):
    """Active client and its storage namespace"""

    name: str
    namespace: str


class TenantUpdate(BaseModel):
    """Switch to another client"""

    name: str


class SyncResponse(BaseModel):
    """Outcome of a bulk sync"""

    synced: int
    response: Any = None


class NotificationResponse(BaseModel):
    """Current transient notification, if any"""

    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = "healthy"
    version: str
    tenant: str
    storage_connected: bool
    sync_configured: bool
