"""Pagination sink — where compiled predicates end up."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from yummy_search_specifications import CompiledPredicate, MemoryOperatorRegistry


@runtime_checkable
class PaginationSink(Protocol):
    """Holds the conditions of a paginated query.

    ``merge`` appends; it never replaces conditions already present.
    """

    @property
    def conditions(self) -> Sequence[CompiledPredicate]:
        ...

    def merge(self, predicates: Iterable[CompiledPredicate]) -> None:
        ...


class PaginationConditions:
    """List-backed :class:`PaginationSink`.

    All conditions are ANDed; :meth:`filter` applies them to in-memory rows.
    """

    def __init__(self, conditions: Iterable[CompiledPredicate] | None = None) -> None:
        self._conditions: list[CompiledPredicate] = list(conditions or ())

    @property
    def conditions(self) -> tuple[CompiledPredicate, ...]:
        return tuple(self._conditions)

    def merge(self, predicates: Iterable[CompiledPredicate]) -> None:
        self._conditions.extend(predicates)

    def filter(
        self, rows: Iterable[Any], registry: MemoryOperatorRegistry
    ) -> list[Any]:
        return [
            row
            for row in rows
            if all(p.is_satisfied_by(row, registry) for p in self._conditions)
        ]

    def __len__(self) -> int:
        return len(self._conditions)
