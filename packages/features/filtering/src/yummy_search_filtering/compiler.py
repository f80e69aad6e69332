"""ConditionCompiler — submitted criteria -> structured predicates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from yummy_search_core.inflector import canonical_entity
from yummy_search_specifications import CompiledPredicate, PredicateOperator

from .rules import is_column_allowed

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import AllowDenyConfig

logger = logging.getLogger("yummy_search.compiler")


class SearchOperator(str, Enum):
    """Operator names accepted from search forms."""

    MATCHING = "matching"
    NOT_MATCHING = "not_matching"
    CONTAINING = "containing"
    NOT_CONTAINING = "not_containing"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


_PREDICATE_OPERATORS: dict[SearchOperator, PredicateOperator] = {
    SearchOperator.MATCHING: PredicateOperator.EQ,
    SearchOperator.NOT_MATCHING: PredicateOperator.NE,
    SearchOperator.CONTAINING: PredicateOperator.CONTAINS,
    SearchOperator.NOT_CONTAINING: PredicateOperator.NOT_CONTAINS,
    SearchOperator.GREATER_THAN: PredicateOperator.GT,
    SearchOperator.LESS_THAN: PredicateOperator.LT,
}


@dataclass(frozen=True)
class SearchCriterion:
    """One submitted ``(field, operator, value)`` row of a search form."""

    field: str
    operator: str
    value: Any


class ConditionCompiler:
    """Compile criteria into predicates, dropping the ones that do not apply.

    A field key is exactly ``Entity.column``; anything else is malformed.
    Criteria on disallowed columns, with malformed field keys or with
    unknown operators are skipped rather than rejected: a stale form or a
    hand-edited URL should narrow the search, not break the page.
    """

    def compile(
        self,
        criteria: Iterable[SearchCriterion],
        config: AllowDenyConfig,
    ) -> list[CompiledPredicate]:
        out: list[CompiledPredicate] = []
        for criterion in criteria:
            predicate = self.compile_one(criterion, config)
            if predicate is not None:
                out.append(predicate)
        return out

    def compile_one(
        self, criterion: SearchCriterion, config: AllowDenyConfig
    ) -> CompiledPredicate | None:
        """Return the predicate for ``criterion`` or ``None`` when dropped."""
        parts = str(criterion.field).split(".")
        if len(parts) != 2 or not all(parts):
            logger.debug("Dropping criterion with malformed field %r", criterion.field)
            return None
        entity, column = canonical_entity(parts[0]), parts[1]
        if not is_column_allowed(entity, column, config):
            logger.debug("Dropping criterion on disallowed field %s.%s", entity, column)
            return None
        try:
            operator = _PREDICATE_OPERATORS[SearchOperator(criterion.operator)]
        except ValueError:
            logger.debug(
                "Dropping criterion with unknown operator %r", criterion.operator
            )
            return None
        return CompiledPredicate(entity, column, operator, criterion.value)
