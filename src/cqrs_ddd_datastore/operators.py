from enum import Enum


class PropertyOperator(str, Enum):
    """Comparison operators understood by the store's property filters."""

    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    IN = "IN"
    NOT_IN = "NOT_IN"

    # Key ancestry
    HAS_ANCESTOR = "HAS_ANCESTOR"


class CompositeOperator(str, Enum):
    """Logical operators for composite filters."""

    AND = "AND"
    OR = "OR"


class Direction(str, Enum):
    """Sort direction of a property order."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"
