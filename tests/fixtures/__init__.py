"""
Test fixtures and factories for OrderDesk tests.
"""

from tests.fixtures.data import LEGACY_ORDERS, SAMPLE_MODELS, SAMPLE_ORDERS
from tests.fixtures.factories import make_model, make_order, store_namespace

__all__ = [
    "LEGACY_ORDERS",
    "SAMPLE_MODELS",
    "SAMPLE_ORDERS",
    "make_model",
    "make_order",
    "store_namespace",
]
