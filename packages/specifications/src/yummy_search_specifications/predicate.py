"""
CompiledPredicate — a structured ``(column, operator, value)`` condition.

Predicates are produced by the condition compiler and consumed by a
query layer, which renders them with bound parameters. Nothing here
builds SQL text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .operators import PredicateOperator

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry

_MISSING = object()


@dataclass(frozen=True)
class CompiledPredicate:
    """
    Immutable filter condition on one entity column.

    Attributes:
        entity: Canonical entity name, e.g. ``"Orders"``.
        column: Column name within the entity, e.g. ``"status"``.
        operator: Comparison to apply.
        value: Raw value submitted by the caller (never wrapped or cast).
    """

    entity: str
    column: str
    operator: PredicateOperator
    value: Any

    @property
    def field(self) -> str:
        """Qualified column expression, ``"Entity.column"``."""
        return f"{self.entity}.{self.column}"

    def is_satisfied_by(
        self, row: Any, registry: MemoryOperatorRegistry
    ) -> bool:
        """Evaluate against an in-memory row.

        Nested rows (``row["Orders"]["status"]``) are tried first, then
        flat rows (``row["status"]``). Mappings and plain objects both work.
        """
        actual = self._resolve(row)
        return registry.evaluate(self.operator, actual, self.value)

    def _resolve(self, row: Any) -> Any:
        nested = _get(row, self.entity)
        if nested is not _MISSING and nested is not None:
            value = _get(nested, self.column)
            if value is not _MISSING:
                return value
        value = _get(row, self.column)
        return None if value is _MISSING else value

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "op": self.operator.value,
            "val": self.value,
        }


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    return getattr(obj, key, _MISSING)
