### Description ###
# OrderDesk - Local-first Order Intake
# - Order Queries -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Order Queries

Filtering and per-model size breakdowns, recomputed from the full order list
on every call.
"""

from collections.abc import Iterable

from orderdesk.schemas.fields import SIZES, coerce_qty
from orderdesk.schemas.order import BreakdownRow, Order, OrderFilter

SEARCH_FIELDS = ("name", "email", "phone", "address", "notes", "model", "size")


def _search_text(order: Order) -> str:
    values = (getattr(order, field) for field in SEARCH_FIELDS)
    return " ".join(str(v) for v in values if v).lower()


def filter_orders(orders: Iterable[Order], criteria: OrderFilter | None = None) -> list[Order]:
    """
    Orders matching every non-empty criterion, in their original order.

    - text: case-insensitive substring of the customer/order fields
    - model: exact model name
    - size: exact size
    """
    criteria = criteria or OrderFilter()
    needle = criteria.text.lower()

    matched = []
    for order in orders:
        if needle and needle not in _search_text(order):
            continue
        if criteria.model and order.model != criteria.model:
            continue
        if criteria.size and order.size != criteria.size:
            continue
        matched.append(order)
    return matched


def breakdown(orders: Iterable[Order]) -> dict[str, dict[str, int]]:
    """Quantity per size for each model that has orders; all sizes are present"""
    by_model: dict[str, dict[str, int]] = {}
    for order in orders:
        sizes = by_model.setdefault(order.model, dict.fromkeys(SIZES, 0))
        if order.size in sizes:
            sizes[order.size] += coerce_qty(order.qty)
    return by_model


def row_total(sizes: dict[str, int]) -> int:
    return sum(sizes.values())


def breakdown_rows(orders: Iterable[Order]) -> list[BreakdownRow]:
    """Breakdown as display rows with totals"""
    return [
        BreakdownRow(model=model, sizes=sizes, total=row_total(sizes))
        for model, sizes in breakdown(orders).items()
    ]


def distinct_models(orders: Iterable[Order]) -> list[str]:
    """Model names in first-seen order"""
    return list(dict.fromkeys(order.model for order in orders))
