"""Comparison operators: =, !=, >, <.

The submitted value is coerced to the row value's type first. A value that
cannot be coerced, or compared, is never equal, always different, and
neither greater nor less.
"""

from __future__ import annotations

from collections.abc import Callable
from operator import eq, gt, lt, ne
from typing import Any, ClassVar

from ..evaluator import MemoryOperator, coerce_value
from ..operators import PredicateOperator


class ComparisonOperator(MemoryOperator):
    """Binary comparison after coercion; subclasses pick the operator."""

    predicate_operator: ClassVar[PredicateOperator]
    compare: ClassVar[Callable[[Any, Any], Any]]
    on_mismatch: ClassVar[bool] = False

    @property
    def name(self) -> PredicateOperator:
        return self.predicate_operator

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        try:
            expected = coerce_value(field_value, condition_value)
            return bool(type(self).compare(field_value, expected))
        except (TypeError, ValueError, ArithmeticError):
            return self.on_mismatch


class EqualOperator(ComparisonOperator):
    predicate_operator = PredicateOperator.EQ
    compare = eq


class NotEqualOperator(ComparisonOperator):
    predicate_operator = PredicateOperator.NE
    compare = ne
    on_mismatch = True


class GreaterThanOperator(ComparisonOperator):
    predicate_operator = PredicateOperator.GT
    compare = gt


class LessThanOperator(ComparisonOperator):
    predicate_operator = PredicateOperator.LT
    compare = lt
