"""Structured predicates and their in-memory evaluation."""

from .evaluator import MemoryOperator, MemoryOperatorRegistry, coerce_value
from .operators import PredicateOperator
from .operators_memory import build_default_registry
from .predicate import CompiledPredicate

__all__ = [
    # Core types
    "CompiledPredicate",
    "PredicateOperator",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    "coerce_value",
]
