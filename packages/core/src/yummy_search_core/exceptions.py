"""Exceptions for the yummy-search toolkit."""

from __future__ import annotations

from typing import Any


class YummySearchError(Exception):
    """Root exception for the entire yummy-search toolkit."""


class ConfigurationError(YummySearchError):
    """Raised when a required collaborator or setting is missing.

    Usage: ``SearchComponent.startup()`` raises this when no pagination
    sink was supplied. It signals a setup fault, never bad user input.
    """


class SchemaLookupError(YummySearchError):
    """Raised when a schema provider does not know the requested entity."""

    def __init__(self, entity: str, reason: str | None = None) -> None:
        self.entity = entity
        self.reason = reason
        msg = f"Unknown entity {entity!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SCHEMA_LOOKUP_ERROR",
            "entity": self.entity,
            "reason": self.reason,
        }


class ValidationError(YummySearchError):
    """Raised when submitted data fails validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "errors": self.errors,
        }


class MalformedRequestError(ValidationError):
    """Raised when a search payload violates the request contract.

    E.g. the ``field``, ``operator`` and ``search`` lists differ in length.
    Stale or disallowed criteria are *not* malformed; they are dropped.
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MALFORMED_REQUEST",
            "errors": self.errors,
        }
