### Description ###
# OrderDesk - Local-first Order Intake
# - Schemas Package -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Schemas Package

Contains Pydantic models for records and request/response validation:
- fields: lenient field types shared by stored records
- model: product model schemas
- order: order, order input, filter and breakdown schemas
- responses: common response schemas
"""

from .fields import SIZES
from .model import Model, ModelCreate, ModelUpdate
from .order import BreakdownRow, Order, OrderFilter, OrderInput
from .responses import APIResponse, ErrorDetail, ErrorResponse

__all__ = [
    "APIResponse",
    "BreakdownRow",
    "ErrorDetail",
    "ErrorResponse",
    "Model",
    "ModelCreate",
    "ModelUpdate",
    "Order",
    "OrderFilter",
    "OrderInput",
    "SIZES",
]
