from enum import Enum


class PredicateOperator(str, Enum):
    """Comparison operators a compiled predicate may carry."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
