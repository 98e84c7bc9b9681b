"""Unit tests for the derived view: filter, sort, aggregate."""

from decimal import Decimal

import pytest

from ims.application.view import (
    DEFAULT_SORT_KEY,
    build_view,
    filter_products,
    low_stock,
    parse_sort_key,
    sort_products,
    toggle_sort_key,
    total_inventory_value,
)
from ims.domain.model.value_objects import Money
from tests.fakes import product


def _catalog():
    return [
        product("1", "Vela aromática", 10, "15.50"),
        product("2", "caneca", 3, "22.00"),
        product("3", "Bolsa de crochê", 4, "80.00"),
        product("4", "VELA simples", 0, "5.00"),
        product("5", "Agenda", 12, "30.00"),
    ]


def _ids(products):
    return [p.id for p in products]


# ── Filter ───────────────────────────────────────────────────────────────────


class TestFilter:

    def test_case_insensitive_substring(self):
        assert _ids(filter_products(_catalog(), "vela")) == ["1", "4"]

    def test_match_inside_name(self):
        assert _ids(filter_products(_catalog(), "CROCH")) == ["3"]

    def test_empty_term_returns_everything_in_order(self):
        assert _ids(filter_products(_catalog(), "")) == ["1", "2", "3", "4", "5"]

    def test_no_match(self):
        assert filter_products(_catalog(), "tapete") == []

    def test_result_is_exact_subset(self):
        catalog = _catalog()
        for term in ("a", "ve", "de", "x", " "):
            result = filter_products(catalog, term)
            expected = [p for p in catalog if term.lower() in p.name.lower()]
            assert result == expected


# ── Sort ─────────────────────────────────────────────────────────────────────


class TestSort:

    def test_name_ascending_ignores_case_and_accents(self):
        products = [
            product("1", "caixa", 1, "1"),
            product("2", "Banana", 1, "1"),
            product("3", "água", 1, "1"),
        ]
        assert _ids(sort_products(products, "name-asc")) == ["3", "2", "1"]

    def test_name_descending(self):
        assert _ids(sort_products(_catalog(), "name-desc")) == ["4", "1", "2", "3", "5"]

    def test_quantity_ascending(self):
        assert _ids(sort_products(_catalog(), "quantity-asc")) == ["4", "2", "3", "1", "5"]

    def test_quantity_descending(self):
        assert _ids(sort_products(_catalog(), "quantity-desc")) == ["5", "1", "3", "2", "4"]

    def test_price_ascending(self):
        assert _ids(sort_products(_catalog(), "price-asc")) == ["4", "1", "2", "5", "3"]

    def test_total_value_descending(self):
        # totals: 155, 66, 320, 0, 360
        assert _ids(sort_products(_catalog(), "totalValue-desc")) == ["5", "3", "1", "2", "4"]

    def test_equal_keys_keep_original_order_in_both_directions(self):
        products = [
            product("1", "A", 5, "1"),
            product("2", "B", 5, "1"),
            product("3", "C", 1, "1"),
        ]
        assert _ids(sort_products(products, "quantity-asc")) == ["3", "1", "2"]
        assert _ids(sort_products(products, "quantity-desc")) == ["1", "2", "3"]

    @pytest.mark.parametrize("key", ["bogus", "nome-asc", "price-up", "", "price"])
    def test_unrecognised_key_keeps_order(self, key):
        assert _ids(sort_products(_catalog(), key)) == ["1", "2", "3", "4", "5"]

    @pytest.mark.parametrize(
        "key",
        [f"{f}-{d}" for f in ("name", "quantity", "price", "totalValue") for d in ("asc", "desc")],
    )
    def test_sorting_is_idempotent(self, key):
        once = sort_products(_catalog(), key)
        assert sort_products(once, key) == once

    def test_fractional_quantities_sort_numerically(self):
        products = [product("1", "A", 3, "1"), product("2", "B", Decimal("2.5"), "1")]
        assert _ids(sort_products(products, "quantity-asc")) == ["2", "1"]

    def test_does_not_mutate_input(self):
        catalog = _catalog()
        sort_products(catalog, "price-desc")
        assert _ids(catalog) == ["1", "2", "3", "4", "5"]


class TestSortKeys:

    def test_default(self):
        assert DEFAULT_SORT_KEY == "name-asc"

    def test_parse(self):
        assert parse_sort_key("totalValue-desc") == ("totalValue", "desc")
        assert parse_sort_key("weight-asc") is None

    def test_toggle_active_ascending_flips_to_descending(self):
        assert toggle_sort_key("price-asc", "price") == "price-desc"

    def test_toggle_active_descending_flips_to_ascending(self):
        assert toggle_sort_key("price-desc", "price") == "price-asc"

    def test_toggle_other_field_resets_to_ascending(self):
        assert toggle_sort_key("price-desc", "name") == "name-asc"
        assert toggle_sort_key("price-asc", "quantity") == "quantity-asc"

    def test_toggle_twice_returns_to_default(self):
        key = toggle_sort_key(DEFAULT_SORT_KEY, "name")
        assert key == "name-desc"
        assert toggle_sort_key(key, "name") == DEFAULT_SORT_KEY


# ── Aggregates ───────────────────────────────────────────────────────────────


class TestAggregates:

    def test_total_inventory_value(self):
        products = [product("1", "A", 3, "5.00"), product("2", "B", 4, "2.50")]
        assert total_inventory_value(products) == Money.of("25.00")

    def test_total_of_empty_list_is_zero(self):
        assert total_inventory_value([]) == Money.zero()

    def test_total_matches_sum_of_lines(self):
        catalog = _catalog()
        expected = sum(p.quantity * p.price.amount for p in catalog)
        assert total_inventory_value(catalog).amount == expected

    def test_low_stock_threshold(self):
        products = [
            product("1", "A", 3, "1"),
            product("2", "B", 4, "1"),
            product("3", "C", 0, "1"),
        ]
        assert _ids(low_stock(products)) == ["1", "3"]


# ── Composed view ────────────────────────────────────────────────────────────


class TestBuildView:

    def test_rows_filtered_and_sorted(self):
        view = build_view(_catalog(), "vela", "price-asc")
        assert [r.id for r in view.rows] == ["4", "1"]
        assert view.shown == 2
        assert view.stored == 5

    def test_aggregates_ignore_filter(self):
        unfiltered = build_view(_catalog(), "", "name-asc")
        filtered = build_view(_catalog(), "agenda", "price-desc")
        assert filtered.total_inventory_value == unfiltered.total_inventory_value
        assert filtered.low_stock_count == unfiltered.low_stock_count == 2
        assert filtered.low_stock_names == ["caneca", "VELA simples"]

    def test_rows_are_formatted(self):
        view = build_view([product("1", "Vela", 10, "15.50")], "", "name-asc")
        row = view.rows[0]
        assert row.price == "R$ 15,50"
        assert row.total_value == "R$ 155,00"
        assert row.quantity == "10"
        assert row.low_stock is False
        assert view.total_inventory_value == "R$ 155,00"
