"""
Unit tests for CSV export.
"""

from orderdesk.services.export import export_filename, to_csv
from orderdesk.services.patcher import patch_orders
from tests.fixtures.data import SAMPLE_ORDERS, TINY_PNG


class TestToCsv:
    """Test CSV serialization and quoting."""

    def test_quotes_commas_and_doubles_quotes(self):
        assert to_csv([{"a": "x,y", "b": 'he said "hi"'}]) == 'a,b\n"x,y","he said ""hi"""'

    def test_empty_input(self):
        assert to_csv([]) == ""

    def test_plain_values_unquoted(self):
        assert to_csv([{"a": "x", "b": 2}]) == "a,b\nx,2"

    def test_newline_is_quoted(self):
        assert to_csv([{"notes": "line 1\nline 2"}]) == 'notes\n"line 1\nline 2"'

    def test_none_is_empty(self):
        assert to_csv([{"a": None, "b": "x"}]) == "a,b\n,x"

    def test_booleans(self):
        assert to_csv([{"available": True}, {"available": False}]) == "available\ntrue\nfalse"

    def test_header_from_first_record(self):
        csv_text = to_csv([{"a": 1, "b": 2}, {"b": 3, "a": 4, "c": 5}])
        assert csv_text == "a,b\n1,2\n4,3"

    def test_missing_keys_are_empty(self):
        assert to_csv([{"a": 1, "b": 2}, {"a": 3}]) == "a,b\n1,2\n3,"

    def test_no_trailing_newline(self):
        assert not to_csv([{"a": 1}]).endswith("\n")

    def test_orders_use_stored_column_names(self):
        orders = patch_orders(SAMPLE_ORDERS)
        lines = to_csv(orders).split("\n")

        assert lines[0] == "id,ts,client,model,modelImage,size,qty,name,email,phone,address,notes,mockups"
        assert len(lines) == len(orders) + 1
        assert lines[1].startswith("o-3,")

    def test_mockup_lists_are_joined_and_quoted(self):
        csv_text = to_csv([{"mockups": [TINY_PNG, TINY_PNG]}])
        assert csv_text == f'mockups\n"{TINY_PNG},{TINY_PNG}"'


class TestExportFilename:
    def test_spaces_become_underscores(self):
        assert export_filename("Bolos Crew") == "Bolos_Crew_orders.csv"

    def test_single_word(self):
        assert export_filename("ACME") == "ACME_orders.csv"
