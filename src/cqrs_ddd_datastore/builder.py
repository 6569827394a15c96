"""
Shorthand factories for queries, filters, orders and groups.

Example::

    from cqrs_ddd_datastore import builder as qb

    q = (
        qb.query()
        .kind_of("Player")
        .filter_by(qb.ancestor(Key.of("Team", "spurs")))
        .filter_by(qb.gte("age", {"integerValue": "18"}))
        .order_by(qb.asc("age"))
        .group_by(qb.group("position"))
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from .filters import (
    AncestorCondition,
    CompositeCondition,
    PropertyCondition,
)
from .operators import CompositeOperator, Direction, PropertyOperator
from .orders import Group, Order
from .query import Query

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .config import QueryConfig
    from .filters import CompilableFilter, NamespaceScopedValue
    from .keys import Key

    Operand: TypeAlias = Mapping[str, Any] | NamespaceScopedValue


def query(config: QueryConfig | None = None) -> Query:
    return Query(config)


def eq(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.EQUAL, value)


def ne(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.NOT_EQUAL, value)


def lt(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.LESS_THAN, value)


def lte(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.LESS_THAN_OR_EQUAL, value)


def gt(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.GREATER_THAN, value)


def gte(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.GREATER_THAN_OR_EQUAL, value)


def in_(name: str, value: Operand) -> PropertyCondition:
    """Match any of the values in an encoded ``arrayValue``."""
    return PropertyCondition(name, PropertyOperator.IN, value)


def not_in(name: str, value: Operand) -> PropertyCondition:
    return PropertyCondition(name, PropertyOperator.NOT_IN, value)


def ancestor(key: Key) -> AncestorCondition:
    return AncestorCondition(key)


def and_(*conditions: CompilableFilter) -> CompositeCondition:
    return CompositeCondition(CompositeOperator.AND, *conditions)


def or_(*conditions: CompilableFilter) -> CompositeCondition:
    return CompositeCondition(CompositeOperator.OR, *conditions)


def asc(name: str) -> Order:
    return Order(name, Direction.ASCENDING)


def desc(name: str) -> Order:
    return Order(name, Direction.DESCENDING)


def group(name: str) -> Group:
    return Group(name)
