"""
In-memory evaluation of compiled predicates.

Predicate values arrive straight from a query string, so they are usually
``str`` while row values are typed. Operators call :func:`coerce_value` to
bring the submitted value to the row value's type before comparing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .operators import PredicateOperator

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def coerce_value(field_value: Any, condition_value: Any) -> Any:
    """
    Convert a submitted ``str`` to the type of ``field_value``.

    Non-string values, ``None`` row values and string row values are
    returned unchanged.

    Raises:
        ValueError: If the string cannot represent a value of that type.
    """
    if field_value is None or isinstance(field_value, str):
        return condition_value
    if not isinstance(condition_value, str):
        return condition_value
    text = condition_value.strip()
    if isinstance(field_value, bool):
        if text.lower() in _TRUE:
            return True
        if text.lower() in _FALSE:
            return False
        raise ValueError(f"not a boolean: {condition_value!r}")
    if isinstance(field_value, int):
        try:
            return int(text)
        except ValueError:
            return float(text)
    if isinstance(field_value, (float, Decimal)):
        return type(field_value)(text)
    # datetime before date: datetime is a date subclass
    if isinstance(field_value, datetime):
        return datetime.fromisoformat(text)
    if isinstance(field_value, date):
        return date.fromisoformat(text)
    return condition_value


class MemoryOperator(ABC):
    """Strategy for one :class:`PredicateOperator`."""

    @property
    @abstractmethod
    def name(self) -> PredicateOperator:
        ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Args:
            field_value: The value resolved from the row.
            condition_value: The value carried by the predicate, uncoerced.
        """
        ...


class MemoryOperatorRegistry:
    """
    MemoryOperator instances keyed by PredicateOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualOperator())
        registry.evaluate(PredicateOperator.EQ, 150, "150")  # True
    """

    def __init__(self) -> None:
        self._operators: dict[PredicateOperator, MemoryOperator] = {}

    def register(self, operator: MemoryOperator) -> None:
        """Register a strategy, replacing any previous one for its operator."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for op in operators:
            self.register(op)

    @property
    def supported_operators(self) -> set[PredicateOperator]:
        return set(self._operators)

    def evaluate(
        self,
        name: PredicateOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Raises:
            ValueError: If no strategy is registered for ``name``.
        """
        try:
            op = self._operators[name]
        except KeyError:
            raise ValueError(
                f"Unsupported operator for in-memory evaluation: {name}"
            ) from None
        return op.evaluate(field_value, condition_value)
