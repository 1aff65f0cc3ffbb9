### Description ###
# OrderDesk - Local-first Order Intake
# - Lenient Field Types -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Lenient Field Types

Annotated types that never fail validation. Stored records come from older
versions of the app, hand edits and the network, so every field either keeps
a usable value or falls back to its default instead of raising.
"""

import math
import uuid
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

SIZES = ("XS", "S", "M", "L", "XL", "XXL", "XXXL")
DEFAULT_SIZE = "M"


def new_id() -> str:
    """Random unique identifier for a new record"""
    return str(uuid.uuid4())


def now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2026-10-18T09:30:00.000Z"""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def coerce_text(v: Any, default: str = "") -> str:
    """Keep strings, stringify numbers, anything else becomes default."""
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return default


def coerce_qty(v: Any) -> int:
    """Quantity as a whole number of at least 1"""
    if v is None or isinstance(v, bool):
        return 1
    try:
        number = float(v)
    except (TypeError, ValueError, OverflowError):
        return 1
    if math.isnan(number) or math.isinf(number):
        return 1
    return max(1, int(number))


def _coerce_id(v: Any) -> str:
    return coerce_text(v) or new_id()


def _coerce_ts(v: Any) -> str:
    return coerce_text(v) or now_iso()


def _coerce_flag(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    return True


def _coerce_size(v: Any) -> str:
    return v if v in SIZES else DEFAULT_SIZE


def _coerce_mockups(v: Any) -> list[str]:
    if not isinstance(v, (list, tuple)):
        return []
    mockups = []
    for item in v:
        # Pending attachments are {"name": ..., "data": ...}; only the data is kept
        if isinstance(item, dict):
            item = item.get("data")
        if isinstance(item, str):
            mockups.append(item)
    return mockups


def _text_or(default: str):
    return lambda v: coerce_text(v, default)


RecordId = Annotated[str, BeforeValidator(_coerce_id)]
Timestamp = Annotated[str, BeforeValidator(_coerce_ts)]
Text = Annotated[str, BeforeValidator(coerce_text)]
ModelName = Annotated[str, BeforeValidator(_text_or("Model"))]
Flag = Annotated[bool, BeforeValidator(_coerce_flag)]
Size = Annotated[str, BeforeValidator(_coerce_size)]
Quantity = Annotated[int, BeforeValidator(coerce_qty)]
Mockups = Annotated[list[str], BeforeValidator(_coerce_mockups)]
