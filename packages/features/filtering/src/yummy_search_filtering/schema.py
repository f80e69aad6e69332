"""Schema collaborator: column lists and relations per entity."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from yummy_search_core.exceptions import SchemaLookupError
from yummy_search_core.inflector import canonical_entity


class RelationKind(str, Enum):
    """Association kinds a schema provider may report."""

    HAS_ONE = "has_one"
    BELONGS_TO = "belongs_to"
    HAS_MANY = "has_many"
    BELONGS_TO_MANY = "belongs_to_many"


@dataclass(frozen=True)
class RelationDescriptor:
    """One association of an entity.

    ``name`` is the association alias; ``target`` the related entity and
    defaults to ``name`` when the two coincide.
    """

    kind: RelationKind
    name: str
    target: str | None = None

    @property
    def target_entity(self) -> str:
        return canonical_entity(self.target or self.name)


@runtime_checkable
class SchemaProvider(Protocol):
    """Describe entities without exposing the ORM behind them.

    Both methods raise :class:`SchemaLookupError` for unknown entities.
    """

    def columns_of(self, entity: str) -> Sequence[str]:
        ...

    def relations_of(self, entity: str) -> Sequence[RelationDescriptor]:
        ...


class InMemorySchemaProvider:
    """Dict-backed :class:`SchemaProvider`.

    Usage::

        schema = InMemorySchemaProvider(
            {"orders": ["id", "status"], "customers": ["id", "name"]},
            relations={
                "orders": [RelationDescriptor(RelationKind.BELONGS_TO, "Customers")],
            },
        )
    """

    def __init__(
        self,
        tables: Mapping[str, Sequence[str]],
        relations: Mapping[str, Sequence[RelationDescriptor]] | None = None,
    ) -> None:
        self._tables = {canonical_entity(k): tuple(v) for k, v in tables.items()}
        self._relations = {
            canonical_entity(k): tuple(v) for k, v in (relations or {}).items()
        }

    def columns_of(self, entity: str) -> Sequence[str]:
        key = canonical_entity(entity)
        try:
            return self._tables[key]
        except KeyError:
            raise SchemaLookupError(entity, reason="no such table") from None

    def relations_of(self, entity: str) -> Sequence[RelationDescriptor]:
        key = canonical_entity(entity)
        if key not in self._tables:
            raise SchemaLookupError(entity, reason="no such table")
        return self._relations.get(key, ())
