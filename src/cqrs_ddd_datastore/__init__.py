from . import builder, wire
from .composer import compile_filters, compose_filters
from .config import QueryConfig
from .exceptions import (
    DatastoreQueryError,
    QueryCompilationError,
    QueryValidationError,
)
from .filters import (
    KEY_PROPERTY,
    AncestorCondition,
    CompilableFilter,
    CompositeCondition,
    Condition,
    NamespaceScopedValue,
    PropertyCondition,
)
from .keys import Key
from .operators import CompositeOperator, Direction, PropertyOperator
from .orders import Group, Order
from .query import Query

__all__ = [
    # Builder
    "Query",
    "QueryConfig",
    "builder",
    # Filters
    "KEY_PROPERTY",
    "CompilableFilter",
    "NamespaceScopedValue",
    "Condition",
    "PropertyCondition",
    "AncestorCondition",
    "CompositeCondition",
    "compose_filters",
    "compile_filters",
    # Orders / groups
    "Order",
    "Group",
    # Keys
    "Key",
    # Operators
    "PropertyOperator",
    "CompositeOperator",
    "Direction",
    # Wire messages
    "wire",
    # Exceptions
    "DatastoreQueryError",
    "QueryValidationError",
    "QueryCompilationError",
]
