"""
Filter units that compile to wire filter fragments.

The query builder only depends on the :class:`CompilableFilter`
protocol: anything with a ``compile(namespace)`` method returning a
:class:`~cqrs_ddd_datastore.wire.Filter` can be passed to
``Query.filter_by()``.  Namespace resolution is deferred to that call so
the same unit can be compiled against several namespaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from . import wire
from .keys import Key
from .operators import CompositeOperator, PropertyOperator

KEY_PROPERTY = "__key__"


@runtime_checkable
class CompilableFilter(Protocol):
    """Protocol for predicate units accepted by ``Query.filter_by()``."""

    def compile(self, namespace: str | None) -> wire.Filter:
        """Render this predicate as a wire filter scoped to ``namespace``."""
        ...


@runtime_checkable
class NamespaceScopedValue(Protocol):
    """An operand whose encoding depends on the compile-time namespace."""

    def to_value(self, namespace: str | None) -> dict[str, Any]: ...


class Condition(ABC):
    """Base class for filter units with logic operator support."""

    @abstractmethod
    def compile(self, namespace: str | None) -> wire.Filter: ...

    def __and__(self, other: CompilableFilter) -> CompositeCondition:
        return CompositeCondition(CompositeOperator.AND, self, other)

    def __or__(self, other: CompilableFilter) -> CompositeCondition:
        return CompositeCondition(CompositeOperator.OR, self, other)


class PropertyCondition(Condition):
    """
    Compare a single property with a value.

    ``value`` is either an already encoded value mapping such as
    ``{"integerValue": "42"}`` or a :class:`NamespaceScopedValue`
    (e.g. a :class:`Key`) that is encoded on every compile.
    """

    def __init__(
        self,
        property: str,
        op: PropertyOperator | str,
        value: Mapping[str, Any] | NamespaceScopedValue,
    ) -> None:
        self.property = property
        self.op = PropertyOperator(op) if isinstance(op, str) else op
        self.value = value

    def compile(self, namespace: str | None) -> wire.Filter:
        return wire.Filter(
            property_filter=wire.PropertyFilter(
                property=wire.PropertyReference(name=self.property),
                op=self.op,
                value=self._resolve_value(namespace),
            )
        )

    def _resolve_value(self, namespace: str | None) -> dict[str, Any]:
        if isinstance(self.value, NamespaceScopedValue):
            return self.value.to_value(namespace)
        return dict(self.value)

    def __repr__(self) -> str:
        return f"PropertyCondition({self.property!r}, {self.op.value}, {self.value!r})"


class AncestorCondition(PropertyCondition):
    """Restrict results to descendants of ``key``."""

    def __init__(self, key: Key) -> None:
        super().__init__(KEY_PROPERTY, PropertyOperator.HAS_ANCESTOR, key)


class CompositeCondition(Condition):
    """Logical AND / OR over several filter units."""

    def __init__(
        self, op: CompositeOperator | str, *conditions: CompilableFilter
    ) -> None:
        if not conditions:
            raise ValueError("Cannot create an empty composite condition")
        self.op = CompositeOperator(op) if isinstance(op, str) else op
        self.conditions = conditions

    def compile(self, namespace: str | None) -> wire.Filter:
        return wire.Filter(
            composite_filter=wire.CompositeFilter(
                op=self.op,
                filters=tuple(c.compile(namespace) for c in self.conditions),
            )
        )

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.conditions)
        return f"CompositeCondition({self.op.value}, {inner})"
