"""
Naming conventions for entities, columns and labels.

Entity names arrive in several shapes (``"orders"``, ``"Orders"``,
``"order_items"``, ``"OrderItems"``). Everything inside the toolkit uses
the canonical CamelCase form produced by :func:`canonical_entity`;
convert at the boundary and compare canonical names only.

No singularisation or pluralisation is performed: ``"Orders"`` stays
``"Orders"``.
"""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def underscore(name: str) -> str:
    """``"OrderItems"`` / ``"order-items"`` -> ``"order_items"``."""
    out = _ACRONYM_BOUNDARY.sub("_", name.strip())
    out = _WORD_BOUNDARY.sub("_", out)
    out = _SEPARATORS.sub("_", out)
    return out.lower()


def camelize(name: str) -> str:
    """``"order_items"`` -> ``"OrderItems"``."""
    return "".join(_upper_first(part) for part in name.split("_") if part)


def humanize(name: str) -> str:
    """``"created_at"`` -> ``"Created At"``."""
    return " ".join(_upper_first(part) for part in name.split("_") if part)


def tableize(name: str) -> str:
    """Table-style name of an entity: ``"OrderItems"`` -> ``"order_items"``."""
    return underscore(name)


def canonical_entity(name: str) -> str:
    """Canonical entity name used for every lookup and comparison."""
    return camelize(underscore(name))


def display_name(entity: str) -> str:
    """Human-readable entity name: ``"OrderItems"`` -> ``"Order Items"``."""
    return humanize(tableize(entity))
