"""Les deux stockages doivent renvoyer les memes ids, dans le meme ordre."""

import pytest

from app.query.builder import build_predicate
from app.schemas.cars import FilterSpec
from app.services.car_store import InMemoryCarStore
from tests.mocks.sample_cars import ALL_IDS

CASES = [
    (None, []),
    ("Tesla", []),
    ("tesla", []),
    ("AWD", [("seats", "greaterThanOrEqual", "5")]),
    ("hatch", [("segment", "equals", "C")]),
    (None, [("brand", "equals", "Tesla")]),
    (None, [("brand", "equals", "tesla")]),
    (None, [("brand", "contains", "es")]),
    (None, [("model", "startsWith", "model")]),
    (None, [("model", "endsWith", "motor")]),
    (None, [("model", "contains", "e-Golf")]),
    (None, [("model", "contains", "e_Golf")]),
    (None, [("model", "contains", "%")]),
    (None, [("rapid_charge", "isEmpty", None)]),
    (None, [("rapid_charge", "isNotEmpty", None)]),
    (None, [("date", "isEmpty", None)]),
    (None, [("fast_charge_kmh", "isEmpty", None)]),
    (None, [("price_euro", "isNotEmpty", None)]),
    (None, [("price_euro", "lessThan", "40000")]),
    (None, [("price_euro", "lessThanOrEqual", "30000")]),
    (None, [("price_euro", "greaterThan", "56440")]),
    (None, [("accel_sec", "greaterThanOrEqual", "9.5")]),
    (None, [("accel_sec", "lessThan", "5")]),
    (None, [("seats", "equals", "4")]),
    (None, [("id", "lessThanOrEqual", "3")]),
    (None, [("price_euro", "contains", "00")]),
    (None, [("accel_sec", "startsWith", "4.")]),
    (None, [("accel_sec", "equals", "10")]),
    (None, [("plug_type", "endsWith", "ccs"), ("top_speed_kmh", "greaterThan", "200")]),
    ("d", [("body_style", "equals", "SUV"), ("seats", "lessThan", "7")]),
    (None, [("date", "greaterThan", "5")]),
    (None, [("date", "lessThanOrEqual", "8")]),
    (None, [("date", "lessThan", "8")]),
    (None, [("rapid_charge", "greaterThan", "-1")]),
    (None, [("rapid_charge", "lessThan", "1")]),
    (None, [("model", "greaterThanOrEqual", "2")]),
]


@pytest.mark.parametrize("search,filters", CASES)
def test_sql_and_memory_agree(sql_store, memory_store, search, filters):
    specs = [FilterSpec(column=c, operator=o, value=v) for c, o, v in filters]
    predicate, errors = build_predicate(search, specs)
    assert [e for e in errors if e.rejects_request] == []

    sql_ids = [car.id for car in sql_store.execute_query(predicate)]
    memory_ids = [car["id"] for car in memory_store.execute_query(predicate)]
    assert sql_ids == memory_ids


def test_results_ordered_by_id(sql_store):
    predicate, _ = build_predicate()
    assert [car.id for car in sql_store.execute_query(predicate)] == ALL_IDS


def test_memory_store_sorts_by_id():
    store = InMemoryCarStore([{"id": 3, "brand": "C"}, {"id": 1, "brand": "A"}])
    store.add({"id": 2, "brand": "B"})
    predicate, _ = build_predicate()
    assert [r["id"] for r in store.execute_query(predicate)] == [1, 2, 3]


@pytest.mark.parametrize(
    "filters,expected",
    [
        ([("date", "greaterThan", "5")], [i for i in ALL_IDS if i != 7]),
        ([("date", "lessThan", "8")], []),
        ([("rapid_charge", "greaterThan", "-1")], []),
        ([("model", "greaterThanOrEqual", "2")], [3, 12]),
    ],
)
def test_text_column_comparison(sql_store, filters, expected):
    specs = [FilterSpec(column=c, operator=o, value=v) for c, o, v in filters]
    predicate, errors = build_predicate(None, specs)
    assert errors == []
    assert [car.id for car in sql_store.execute_query(predicate)] == expected
