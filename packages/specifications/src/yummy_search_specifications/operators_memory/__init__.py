"""
In-memory operator implementations.

Usage::

    from yummy_search_specifications.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(PredicateOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .standard import (
    EqualOperator,
    GreaterThanOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import ContainsOperator, NotContainsOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance on every call so callers can register
    extra operators without affecting each other.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(PredicateOperator.EQ, "paid", "paid")
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        ContainsOperator(),
        NotContainsOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
