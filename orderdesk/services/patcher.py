### Description ###
# OrderDesk - Local-first Order Intake
# - Record Patcher -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Record Patcher

Turns whatever is found in storage (or received from elsewhere) into complete
Model and Order records. There is no schema migration step: older records
are brought up to date here on every load.

Both functions are idempotent and never raise. Entries that are not
mappings at all are dropped.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from orderdesk.schemas.fields import coerce_text
from orderdesk.schemas.model import Model
from orderdesk.schemas.order import Order


def _records(raw: Any) -> list[Mapping]:
    if not isinstance(raw, (list, tuple)):
        return []
    records = []
    for entry in raw:
        if isinstance(entry, BaseModel):
            entry = entry.model_dump(by_alias=True)
        if isinstance(entry, Mapping):
            records.append(entry)
    return records


def patch_models(raw: Any) -> list[Model]:
    """Complete a raw model list; None or a non-list yields []"""
    return [Model.model_validate(dict(entry)) for entry in _records(raw)]


def patch_orders(raw: Any, models: Iterable[Model] | None = None, tenant: str = "") -> list[Order]:
    """
    Complete a raw order list.

    Args:
        raw: Stored order list (anything; non-lists yield [])
        models: Current models, used to fill a missing modelImage by model name
        tenant: Current client name, used to fill a missing client

    Returns:
        Complete Order records in the original order
    """
    images = {model.name: model.image for model in models or []}

    orders = []
    for entry in _records(raw):
        record = dict(entry)
        if record.get("client") is None:
            record["client"] = tenant
        if record.get("modelImage") is None:
            record["modelImage"] = images.get(coerce_text(record.get("model")), "")
        orders.append(Order.model_validate(record))
    return orders
