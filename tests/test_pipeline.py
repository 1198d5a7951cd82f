"""End-to-end behaviour of the catalog query pipeline."""

import pytest

from storefront.models import ProductRecord, QueryParameters
from storefront.pipeline import run, sort_label, to_display
from storefront.products import load_fallback_products
from storefront.sorting import SortKey


def _names(products):
    return [p.name for p in products]


def test_price_ascending_listing(scenario_records):
    params = QueryParameters(sort_key="price-asc", min_price="", max_price="")
    assert _names(run(scenario_records, params)) == ["Bracelet B", "Ring A"]


def test_category_filter(scenario_records):
    params = QueryParameters(active_category="Rings", sort_key="price-asc")
    result = run(scenario_records, params)
    assert _names(result) == ["Ring A"]
    assert result[0].price == 100


def test_partial_search_text(scenario_records):
    params = QueryParameters(search_text="brace", sort_key="price-asc")
    assert _names(run(scenario_records, params)) == ["Bracelet B"]


def test_unknown_type_is_other():
    records = [{"id": 3, "name": "Z", "price": 10, "type": "xyz"}]
    assert to_display(records[0]).category.value == "Other"
    assert _names(run(records, QueryParameters(active_category="All"))) == ["Z"]
    assert run(records, QueryParameters(active_category="Rings")) == []


def test_min_above_max_yields_nothing(scenario_records):
    params = QueryParameters(min_price="60", max_price="40", sort_key="price-asc")
    assert run(scenario_records, params) == []


@pytest.mark.parametrize("bound", ["0", 0])
def test_zero_bounds_filter_nothing(bound):
    records = [
        ProductRecord(id=1, name="Free sample", price=0, raw_type="bague"),
        ProductRecord(id=2, name="Gold ring", price=250, raw_type="bague"),
    ]
    params = QueryParameters(min_price=bound, max_price=bound)
    assert [p.id for p in run(records, params)] == [1, 2]


def test_price_window_is_inclusive(scenario_records):
    params = QueryParameters(min_price="50", max_price="100")
    assert [p.id for p in run(scenario_records, params)] == [1, 2]


def test_run_is_deterministic():
    records = load_fallback_products()
    params = QueryParameters(search_text="or", sort_key=SortKey.NAME_DESC, min_price="1000")
    first = run(records, params)
    second = run(records, params)
    assert first == second
    assert [p.id for p in first] == [p.id for p in second]


def test_category_filter_is_idempotent():
    records = load_fallback_products()
    params = QueryParameters(active_category="Rings")
    once = run(records, params)
    twice = run(once, params)
    assert [p.id for p in twice] == [p.id for p in once] == ["1", "6"]


def test_equal_prices_keep_input_order():
    records = [
        {"id": "a", "name": "Alliance", "price": 300, "type": "bague"},
        {"id": "b", "name": "Bracelet", "price": 100, "type": "bracelet"},
        {"id": "c", "name": "Collier", "price": 300, "type": "collier"},
    ]
    result = run(records, QueryParameters(sort_key="price-asc"))
    assert [p.id for p in result] == ["b", "a", "c"]


def test_malformed_records_degrade_gracefully():
    records = [
        {"id": 1, "price": "abc"},
        {"id": 2, "name": None, "price": None, "type": None},
        {"id": 3, "name": "Montre", "price": "99.5", "type": "montre"},
    ]
    result = run(records, QueryParameters(sort_key="name-asc"))
    assert [p.id for p in result] == [1, 2, 3]
    assert result[0].price == 0
    assert result[1].name == ""
    assert result[2].price == 99.5

    searched = run(records, QueryParameters(search_text="mon"))
    assert [p.id for p in searched] == [3]


def test_fallback_catalog_sorted_by_price_desc():
    result = run(load_fallback_products(), QueryParameters(sort_key="price-desc"))
    assert [p.price for p in result] == [8500, 3200, 2500, 1800, 1200, 890]
    assert result[0].category.value == "Watches"


def test_sort_label():
    assert sort_label("reco") == "Recommended"
    assert sort_label(SortKey.PRICE_DESC) == "Price ↓"


@pytest.mark.parametrize(
    "broken",
    [
        {"id": 1.5, "name": "Float id", "price": 5},
        {"id": {"x": 1}, "name": "Dict id", "price": 5},
        {"id": 7, "name": "Unsure", "price": 5, "available": "maybe"},
        {"id": 8, "name": "Listed vendor", "price": 5, "vendor_id": [1]},
        {"id": True, "name": "Bool id", "price": "5", "type": ["bague"]},
    ],
)
def test_one_bad_record_does_not_abort_the_run(broken):
    records = [{"id": 1, "name": "Ring A", "price": 100, "type": "ring"}, broken]
    result = run(records, QueryParameters(sort_key="price-asc"))
    assert [p.name for p in result] == [broken["name"], "Ring A"]
    assert result[0].category.value == "Other"


def test_unusable_fields_fall_back_to_defaults():
    product = to_display({"id": 1.5, "vendor_id": [1], "available": "maybe"})
    assert product.id is None
    assert product.vendor_id is None
    assert product.available is True
    assert to_display({"id": 2, "available": "false"}).available is False
    assert to_display({"id": 3, "available": 0}).available is False


def test_non_mapping_records_become_empty_products():
    result = run([None, {"id": 1, "name": "Bague", "price": 10, "type": "bague"}], QueryParameters())
    assert [p.name for p in result] == ["", "Bague"]
