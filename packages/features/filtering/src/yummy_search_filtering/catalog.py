"""FieldCatalogBuilder — searchable fields of an entity and its relations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from yummy_search_core.inflector import canonical_entity, display_name, humanize

from .rules import allowed_columns
from .schema import RelationKind

if TYPE_CHECKING:
    from .config import AllowDenyConfig
    from .schema import SchemaProvider

logger = logging.getLogger("yummy_search.catalog")

# Many-valued relations are left out: a filter on them has no single row to match.
SEARCHABLE_RELATIONS: frozenset[RelationKind] = frozenset(
    {RelationKind.HAS_ONE, RelationKind.BELONGS_TO}
)

FieldCatalog = dict[str, dict[str, str]]


class FieldCatalogBuilder:
    """Build ``{display name: {"Entity.column": label}}`` for a search form.

    The primary entity comes first, followed by each has-one/belongs-to
    relation in the order the schema reports them. Entities with no
    searchable column are omitted, the primary entity included.
    """

    def build(
        self,
        primary: str,
        schema: SchemaProvider,
        config: AllowDenyConfig,
    ) -> FieldCatalog:
        primary = canonical_entity(primary)
        catalog: FieldCatalog = {}

        fields = self.fields_of(primary, schema, config)
        if fields:
            catalog[display_name(primary)] = fields
        else:
            logger.debug("Primary entity %s has no searchable columns", primary)

        for relation in schema.relations_of(primary):
            if relation.kind not in SEARCHABLE_RELATIONS:
                logger.debug(
                    "Skipping %s relation %s", relation.kind.value, relation.name
                )
                continue
            label = display_name(canonical_entity(relation.name))
            if label in catalog:
                continue
            fields = self.fields_of(relation.target_entity, schema, config)
            if fields:
                catalog[label] = fields

        return catalog

    @staticmethod
    def fields_of(
        entity: str,
        schema: SchemaProvider,
        config: AllowDenyConfig,
    ) -> dict[str, str]:
        """Searchable ``{"Entity.column": label}`` for a single entity."""
        entity = canonical_entity(entity)
        columns = allowed_columns(entity, schema.columns_of(entity), config)
        return {f"{entity}.{column}": humanize(column) for column in columns}
