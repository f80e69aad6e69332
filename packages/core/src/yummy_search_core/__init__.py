"""yummy-search-core — exceptions and naming conventions shared by all packages.

Zero third-party dependencies.
"""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    MalformedRequestError,
    SchemaLookupError,
    ValidationError,
    YummySearchError,
)
from .inflector import (
    camelize,
    canonical_entity,
    display_name,
    humanize,
    tableize,
    underscore,
)

__all__ = [
    # Exceptions
    "ConfigurationError",
    "MalformedRequestError",
    "SchemaLookupError",
    "ValidationError",
    "YummySearchError",
    # Inflector
    "camelize",
    "canonical_entity",
    "display_name",
    "humanize",
    "tableize",
    "underscore",
]
