"""
Unit tests for order filtering and size breakdowns.
"""

import pytest

from orderdesk.schemas.fields import SIZES
from orderdesk.schemas.order import OrderFilter
from orderdesk.services.patcher import patch_orders
from orderdesk.services.query import breakdown, breakdown_rows, distinct_models, filter_orders
from tests.fixtures.data import SAMPLE_ORDERS
from tests.fixtures.factories import make_order


@pytest.fixture
def orders():
    return patch_orders(SAMPLE_ORDERS)


class TestFilterOrders:
    """Test search, model and size filters."""

    def test_no_criteria_returns_all(self, orders):
        assert filter_orders(orders) == orders
        assert filter_orders(orders, OrderFilter()) == orders

    def test_text_is_case_insensitive(self, orders):
        result = filter_orders(orders, OrderFilter(text="JANE"))
        assert [o.id for o in result] == ["o-2"]

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("sam@example", ["o-3"]),
            ("555-0101", ["o-1"]),
            ("elm st", ["o-2"]),
            ("gift", ["o-2"]),
            ("classic tee — black", ["o-2", "o-1"]),
        ],
    )
    def test_text_searches_customer_fields(self, orders, text, expected):
        assert [o.id for o in filter_orders(orders, OrderFilter(text=text))] == expected

    def test_text_matches_size(self, orders):
        assert [o.id for o in filter_orders(orders, OrderFilter(text="l"))] != []
        assert [o.id for o in filter_orders(orders, OrderFilter(text="xxl"))] == []

    def test_text_ignores_client_and_id(self, orders):
        assert filter_orders(orders, OrderFilter(text="bolos")) == []
        assert filter_orders(orders, OrderFilter(text="o-1")) == []

    def test_model_is_exact(self, orders):
        result = filter_orders(orders, OrderFilter(model="Classic Tee — Black"))
        assert [o.id for o in result] == ["o-2", "o-1"]
        assert filter_orders(orders, OrderFilter(model="Classic Tee")) == []

    def test_size_is_exact(self, orders):
        assert [o.id for o in filter_orders(orders, OrderFilter(size="M"))] == ["o-2", "o-1"]

    def test_criteria_combine(self, orders):
        result = filter_orders(orders, OrderFilter(text="alex", model="Classic Tee — Black", size="M"))
        assert [o.id for o in result] == ["o-1"]

    def test_adding_criteria_never_grows_result(self, orders):
        broad = filter_orders(orders, OrderFilter(size="M"))
        narrow = filter_orders(orders, OrderFilter(size="M", text="jane"))
        assert set(o.id for o in narrow) <= set(o.id for o in broad)

    def test_preserves_order(self, orders):
        assert filter_orders(list(reversed(orders))) == list(reversed(orders))


class TestBreakdown:
    """Test per-model size totals."""

    def test_sums_quantities(self, orders):
        table = breakdown(orders)
        assert table["Classic Tee — Black"]["M"] == 3
        assert table["Classic Tee — White"]["L"] == 3

    def test_every_size_present(self, orders):
        for sizes in breakdown(orders).values():
            assert list(sizes) == list(SIZES)

    def test_only_models_with_orders(self, orders):
        assert set(breakdown(orders)) == {"Classic Tee — Black", "Classic Tee — White"}

    def test_empty(self):
        assert breakdown([]) == {}
        assert breakdown_rows([]) == []

    def test_rows_have_totals(self, orders):
        rows = {row.model: row for row in breakdown_rows(orders)}
        assert rows["Classic Tee — Black"].total == 3
        assert rows["Classic Tee — White"].total == 3
        assert sum(row.total for row in rows.values()) == sum(o.qty for o in orders)

    def test_sizes_accumulate_per_model(self):
        orders = [
            make_order(model="Hoodie", size="XS", qty=1),
            make_order(model="Hoodie", size="XXXL", qty=4),
            make_order(model="Hoodie", size="XS", qty=2),
        ]
        (row,) = breakdown_rows(orders)
        assert row.sizes["XS"] == 3
        assert row.sizes["XXXL"] == 4
        assert row.total == 7


class TestDistinctModels:
    def test_first_seen_order(self, orders):
        assert distinct_models(orders) == ["Classic Tee — White", "Classic Tee — Black"]
