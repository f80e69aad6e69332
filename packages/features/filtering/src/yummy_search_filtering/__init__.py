"""Search filters for paginated lists: field catalog, allow/deny rules, compilation."""

from __future__ import annotations

from yummy_search_core.exceptions import (
    ConfigurationError,
    MalformedRequestError,
    SchemaLookupError,
)

from .catalog import FieldCatalog, FieldCatalogBuilder
from .compiler import ConditionCompiler, SearchCriterion, SearchOperator
from .component import SearchComponent, SearchHelperData
from .config import DEFAULT_OPERATORS, WILDCARD, AllowDenyConfig, SearchSettings
from .pagination import PaginationConditions, PaginationSink
from .request import SearchRequest
from .rules import allowed_columns, is_column_allowed
from .schema import (
    InMemorySchemaProvider,
    RelationDescriptor,
    RelationKind,
    SchemaProvider,
)

__all__ = [
    "AllowDenyConfig",
    "ConditionCompiler",
    "ConfigurationError",
    "DEFAULT_OPERATORS",
    "FieldCatalog",
    "FieldCatalogBuilder",
    "InMemorySchemaProvider",
    "MalformedRequestError",
    "PaginationConditions",
    "PaginationSink",
    "RelationDescriptor",
    "RelationKind",
    "SchemaLookupError",
    "SchemaProvider",
    "SearchComponent",
    "SearchCriterion",
    "SearchHelperData",
    "SearchOperator",
    "SearchRequest",
    "SearchSettings",
    "WILDCARD",
    "allowed_columns",
    "is_column_allowed",
]
