### Description ###
# OrderDesk - Local-first Order Intake
# - Product Model Schemas -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Product Model Schemas

A Model is one garment variant customers can order (e.g. "Classic Tee — Black").
"""

from pydantic import BaseModel, Field

from orderdesk.schemas.fields import Flag, ModelName, RecordId, Text, new_id


class Model(BaseModel):
    """Stored product model. Validation never fails; bad fields get defaults."""

    id: RecordId = Field(default_factory=new_id, description="Unique model ID")
    name: ModelName = Field("Model", description="Display name, copied onto orders")
    available: Flag = Field(True, description="Shown in the new-order form")
    image: Text = Field("", description="Preview image as a base64 data URL")


class ModelUpdate(BaseModel):
    """Partial edit of a draft model"""

    name: str | None = None
    available: bool | None = None
    image: str | None = None


class ModelCreate(BaseModel):
    """New draft model"""

    name: str = "New Model"
