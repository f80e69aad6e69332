"""Tests for SearchRequest parsing."""

from __future__ import annotations

import pytest

from yummy_search_core.exceptions import MalformedRequestError
from yummy_search_filtering.compiler import SearchCriterion
from yummy_search_filtering.config import SearchSettings
from yummy_search_filtering.request import SearchRequest


@pytest.fixture
def settings() -> SearchSettings:
    return SearchSettings(model="Orders")


def test_absent_payload_means_no_search(settings) -> None:
    assert SearchRequest.from_query({}, settings) is None
    assert SearchRequest.from_query({"page": "2"}, settings) is None
    assert SearchRequest.from_query({"YummySearch": {}}, settings) is None


def test_clear_signal_wins(settings) -> None:
    params = {
        "YummySearch": {
            "field": ["Orders.status"],
            "operator": ["matching"],
            "search": ["paid"],
        },
        "YummySearch_clear": "",
    }
    assert SearchRequest.from_query(params, settings) is None


def test_criteria_are_zipped_in_order(settings) -> None:
    params = {
        "YummySearch": {
            "field": ["Orders.status", "Orders.total"],
            "operator": ["matching", "greater_than"],
            "search": ["paid", "100"],
        }
    }
    request = SearchRequest.from_query(params, settings)
    assert request is not None
    assert request.criteria() == [
        SearchCriterion("Orders.status", "matching", "paid"),
        SearchCriterion("Orders.total", "greater_than", "100"),
    ]


def test_scalars_are_single_rows(settings) -> None:
    params = {
        "YummySearch": {
            "field": "Orders.status",
            "operator": "matching",
            "search": "paid",
        }
    }
    request = SearchRequest.from_query(params, settings)
    assert request is not None
    assert request.criteria() == [
        SearchCriterion("Orders.status", "matching", "paid")
    ]


def test_indexed_mappings_are_ordered_by_index(settings) -> None:
    params = {
        "YummySearch": {
            "field": {"1": "Orders.total", "0": "Orders.status"},
            "operator": {"1": "less_than", "0": "matching"},
            "search": {"1": "5", "0": "paid"},
        }
    }
    request = SearchRequest.from_query(params, settings)
    assert request is not None
    assert [c.field for c in request.criteria()] == ["Orders.status", "Orders.total"]


def test_mismatched_lengths_are_malformed(settings) -> None:
    params = {
        "YummySearch": {
            "field": ["Orders.status", "Orders.total"],
            "operator": ["matching"],
            "search": ["paid", "100"],
        }
    }
    with pytest.raises(MalformedRequestError) as exc_info:
        SearchRequest.from_query(params, settings)
    assert "__root__" in exc_info.value.errors


def test_non_mapping_payload_is_malformed(settings) -> None:
    with pytest.raises(MalformedRequestError) as exc_info:
        SearchRequest.from_query({"YummySearch": "Orders.status"}, settings)
    assert "YummySearch" in exc_info.value.errors


def test_custom_keys() -> None:
    settings = SearchSettings(model="Orders", search_key="q", clear_key="reset")
    params = {"q": {"field": ["Orders.id"], "operator": ["matching"], "search": ["1"]}}
    assert SearchRequest.from_query(params, settings) is not None
    assert SearchRequest.from_query({**params, "reset": "1"}, settings) is None
