"""
CSV export.

Fields are quoted only when they contain a comma, a double quote or a
newline; embedded quotes are doubled. Lines end with a bare newline and the
last line has none.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def _field(value: Any) -> str:
    text = _stringify(value).replace('"', '""')
    if "," in text or '"' in text or "\n" in text:
        return f'"{text}"'
    return text


def _as_mapping(row: Mapping | BaseModel) -> Mapping:
    if isinstance(row, BaseModel):
        return row.model_dump(by_alias=True)
    return row


def to_csv(rows: Sequence[Mapping | BaseModel]) -> str:
    """
    Serialize uniform records to CSV text.

    The header is the key order of the first record. Empty input gives "".
    """
    if not rows:
        return ""

    records = [_as_mapping(row) for row in rows]
    headers = list(records[0].keys())

    lines = [",".join(headers)]
    for record in records:
        lines.append(",".join(_field(record.get(header)) for header in headers))
    return "\n".join(lines)


def export_filename(tenant_name: str) -> str:
    """Download name for a client's orders, e.g. Bolos_Crew_orders.csv"""
    return f"{tenant_name.replace(' ', '_')}_orders.csv"
