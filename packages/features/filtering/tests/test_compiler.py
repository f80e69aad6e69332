"""Tests for ConditionCompiler."""

from __future__ import annotations

import pytest

from yummy_search_filtering.compiler import (
    ConditionCompiler,
    SearchCriterion,
    SearchOperator,
)
from yummy_search_filtering.config import AllowDenyConfig
from yummy_search_specifications import CompiledPredicate, PredicateOperator


@pytest.mark.parametrize(
    ("operator", "expected"),
    [
        ("matching", PredicateOperator.EQ),
        ("not_matching", PredicateOperator.NE),
        ("containing", PredicateOperator.CONTAINS),
        ("not_containing", PredicateOperator.NOT_CONTAINS),
        ("greater_than", PredicateOperator.GT),
        ("less_than", PredicateOperator.LT),
    ],
)
def test_operator_mapping(operator: str, expected: PredicateOperator) -> None:
    out = ConditionCompiler().compile(
        [SearchCriterion("Orders.total", operator, "100")], AllowDenyConfig()
    )
    assert out == [CompiledPredicate("Orders", "total", expected, "100")]


def test_every_search_operator_is_mapped() -> None:
    compiler = ConditionCompiler()
    for op in SearchOperator:
        predicate = compiler.compile_one(
            SearchCriterion("Orders.status", op.value, "x"), AllowDenyConfig()
        )
        assert predicate is not None


def test_allowlist_scenario() -> None:
    config = AllowDenyConfig(allow={"Orders": ["status", "total"]})
    criteria = [
        SearchCriterion("Orders.status", "matching", "paid"),
        SearchCriterion("Orders.total", "greater_than", "100"),
        SearchCriterion("Orders.secret", "matching", "x"),
    ]
    out = ConditionCompiler().compile(criteria, config)
    assert out == [
        CompiledPredicate("Orders", "status", PredicateOperator.EQ, "paid"),
        CompiledPredicate("Orders", "total", PredicateOperator.GT, "100"),
    ]


def test_denied_criterion_is_dropped_in_place() -> None:
    config = AllowDenyConfig(deny={"Customers": ["password"]})
    criteria = [
        SearchCriterion("Customers.password", "matching", "hunter2"),
        SearchCriterion("Customers.name", "containing", "ann"),
    ]
    out = ConditionCompiler().compile(criteria, config)
    assert len(out) == 1
    assert out[0].field == "Customers.name"


def test_unknown_operator_is_dropped() -> None:
    out = ConditionCompiler().compile(
        [
            SearchCriterion("Orders.status", "sounds_like", "paid"),
            SearchCriterion("Orders.status", "matching", "paid"),
        ],
        AllowDenyConfig(),
    )
    assert [p.operator for p in out] == [PredicateOperator.EQ]


@pytest.mark.parametrize(
    "field", ["status", "Orders.", ".status", "", "Orders.status.x", "Orders..status"]
)
def test_malformed_field_is_dropped(field: str) -> None:
    out = ConditionCompiler().compile(
        [SearchCriterion(field, "matching", "paid")], AllowDenyConfig()
    )
    assert out == []


def test_duplicates_are_kept() -> None:
    criterion = SearchCriterion("Orders.status", "not_matching", "void")
    out = ConditionCompiler().compile([criterion, criterion], AllowDenyConfig())
    assert len(out) == 2


def test_entity_is_canonicalised() -> None:
    config = AllowDenyConfig(deny={"OrderItems": "*"})
    out = ConditionCompiler().compile(
        [
            SearchCriterion("order_items.sku", "matching", "A1"),
            SearchCriterion("orders.status", "matching", "paid"),
        ],
        config,
    )
    assert out == [CompiledPredicate("Orders", "status", PredicateOperator.EQ, "paid")]


def test_values_are_not_wrapped() -> None:
    (pred,) = ConditionCompiler().compile(
        [SearchCriterion("Orders.total", "greater_than", "100")], AllowDenyConfig()
    )
    assert pred.value == "100"


def test_nested_path_cannot_reach_a_denied_entity() -> None:
    config = AllowDenyConfig(deny={"Customers": ["password"]})
    out = ConditionCompiler().compile(
        [
            SearchCriterion("Orders.Customers.password", "matching", "hunter2"),
            SearchCriterion("Customers.password", "matching", "hunter2"),
        ],
        config,
    )
    assert out == []


def test_column_rules_ignore_case() -> None:
    config = AllowDenyConfig(
        deny={"Customers": ["password"]},
        allow={"Orders": ["Status"]},
    )
    out = ConditionCompiler().compile(
        [
            SearchCriterion("Customers.PASSWORD", "matching", "hunter2"),
            SearchCriterion("Orders.status", "matching", "paid"),
        ],
        config,
    )
    assert out == [CompiledPredicate("Orders", "status", PredicateOperator.EQ, "paid")]
