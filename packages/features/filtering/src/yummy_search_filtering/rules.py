"""Allow/deny evaluation shared by the catalog builder and the compiler."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yummy_search_core.inflector import canonical_entity

from .config import WILDCARD

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .config import AllowDenyConfig


def is_column_allowed(entity: str, column: str, config: AllowDenyConfig) -> bool:
    """Return whether ``entity.column`` may be searched.

    First match wins: an explicitly denied column, then a wildcard deny on
    the entity, then a whitelist on the entity that does not list the column.
    Anything else is allowed. Column names are compared case-insensitively,
    as SQL engines compare unquoted identifiers.
    """
    entity = canonical_entity(entity)
    column = column.lower()
    denied = config.deny.get(entity)
    if denied is not None and denied != WILDCARD and column in denied:
        return False
    if denied == WILDCARD:
        return False
    allowed = config.allow.get(entity)
    return not (allowed is not None and column not in allowed)


def allowed_columns(
    entity: str, columns: Iterable[str], config: AllowDenyConfig
) -> list[str]:
    """Filter ``columns`` down to the searchable ones, keeping their order."""
    return [c for c in columns if is_column_allowed(entity, c, config)]
