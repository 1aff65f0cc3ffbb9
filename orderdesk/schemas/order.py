### Description ###
# OrderDesk - Local-first Order Intake
# - Order Schemas -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Order Schemas

Pydantic models for order data validation and serialization.

Orders are snapshots: the model name and image are copied in when the order
is created and never follow later edits to the Model. Field order here is
the column order of CSV exports and the key order of sync payloads.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from orderdesk.schemas.fields import (
    SIZES,
    Mockups,
    Quantity,
    RecordId,
    Size,
    Text,
    Timestamp,
    new_id,
    now_iso,
)

SizeName = Literal["XS", "S", "M", "L", "XL", "XXL", "XXXL"]


class Order(BaseModel):
    """Stored customer order. Validation never fails; bad fields get defaults."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())

    id: RecordId = Field(default_factory=new_id, description="Unique order ID")
    ts: Timestamp = Field(default_factory=now_iso, description="Creation time (ISO-8601 UTC)")
    client: Text = Field("", description="Client name at creation time")
    model: Text = Field("", description="Model name snapshot")
    model_image: Text = Field("", alias="modelImage", description="Model image snapshot")
    size: Size = Field("M", description=f"One of {', '.join(SIZES)}")
    qty: Quantity = Field(1, description="Quantity (at least 1)")
    name: Text = ""
    email: Text = ""
    phone: Text = ""
    address: Text = ""
    notes: Text = ""
    mockups: Mockups = Field(default_factory=list, description="Mockup images as data URLs")

    def to_record(self) -> dict:
        """Plain dict with storage/wire key names"""
        return self.model_dump(by_alias=True)


class OrderInput(BaseModel):
    """New-order form submission"""

    model_config = ConfigDict(protected_namespaces=())

    model_id: str = Field("", description="ID of the selected model")
    size: SizeName = "M"
    qty: Quantity = 1
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    notes: str = ""
    mockups: Mockups = Field(default_factory=list, description="Mockup images as data URLs")


class OrderFilter(BaseModel):
    """Order list filters; empty values match everything"""

    text: str = Field("", description="Case-insensitive search across customer and order fields")
    model: str = Field("", description="Exact model name")
    size: str = Field("", description="Exact size")


class BreakdownRow(BaseModel):
    """Per-model quantities for every size"""

    model: str
    sizes: dict[str, int]
    total: int
