"""Substring operators: contains, not_contains.

Matching is case-insensitive, like ``LIKE '%value%'`` on most SQL engines.
"""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import PredicateOperator


class ContainsOperator(MemoryOperator):
    @property
    def name(self) -> PredicateOperator:
        return PredicateOperator.CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value).lower() in str(field_value).lower()


class NotContainsOperator(MemoryOperator):
    @property
    def name(self) -> PredicateOperator:
        return PredicateOperator.NOT_CONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value).lower() not in str(field_value).lower()
