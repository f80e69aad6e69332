"""Immutable search configuration built once by the caller."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from yummy_search_core.inflector import canonical_entity

WILDCARD = "*"

DEFAULT_OPERATORS: dict[str, str] = {
    "containing": "Containing",
    "not_containing": "Not Containing",
    "greater_than": "Greater than",
    "less_than": "Less than",
    "matching": "Exact Match",
    "not_matching": "Not Exact Match",
}


class AllowDenyConfig(BaseModel):
    """Per-entity allow/deny rules for searchable columns.

    ``deny`` maps an entity to a set of columns, or to ``"*"`` to hide the
    whole entity. ``allow`` maps an entity to the only columns that may be
    searched. Entity keys are stored in canonical form, column names in
    lower case, and both mappings are read-only.
    """

    model_config = ConfigDict(frozen=True)

    deny: Mapping[str, Literal["*"] | frozenset[str]] = Field(
        default_factory=dict, validate_default=True
    )
    allow: Mapping[str, frozenset[str]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("deny", "allow", mode="before")
    @classmethod
    def _canonical_keys(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        return {
            canonical_entity(str(k)): _lower_columns(v) for k, v in value.items()
        }

    @field_validator("deny", "allow", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))


def _lower_columns(columns: Any) -> Any:
    if isinstance(columns, (list, tuple, set, frozenset)):
        return frozenset(str(c).lower() for c in columns)
    return columns


class SearchSettings(BaseModel):
    """Everything a :class:`SearchComponent` needs besides its collaborators.

    Supplying ``operators`` replaces the default labels wholesale.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    operators: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_OPERATORS))
    search_key: str = "YummySearch"
    clear_key: str = "YummySearch_clear"
    access: AllowDenyConfig = Field(default_factory=AllowDenyConfig)

    @field_validator("model")
    @classmethod
    def _canonical_model(cls, value: str) -> str:
        return canonical_entity(value)
