"""
Fluent query statement.

Example::

    q = (
        Query()
        .kind_of("Player")
        .filter_by(eq("team", {"stringValue": "spurs"}))
        .filter_by(gt("age", {"integerValue": "30"}))
        .order_by(desc("goals"))
        .limit(10)
    )
    wire_query = q.compile(namespace="league-2024")

The builder only records what the caller asks for.  ``compile()`` reads
that state and produces a fresh immutable :class:`~.wire.WireQuery`; it
never mutates the builder, so one builder can be compiled against as many
namespaces as needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import wire
from .composer import compile_filters
from .config import QueryConfig
from .exceptions import QueryValidationError
from .filters import KEY_PROPERTY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .filters import CompilableFilter
    from .orders import Group, Order

logger = logging.getLogger("cqrs_ddd.datastore.query")


class Query:
    """
    Accumulates kinds, projections, filters, orders, groups, cursor,
    limit and offset.  Every mutator returns ``self`` for chaining.

    Filters are combined with AND at compile time.  Nothing is validated
    unless the builder is configured with ``QueryConfig(strict=True)``.
    """

    def __init__(self, config: QueryConfig | None = None) -> None:
        self.config = config or QueryConfig()
        self._kinds: list[str] = []
        self._projections: list[str] = []
        self._filters: list[CompilableFilter] = []
        self._orders: list[wire.PropertyOrder] = []
        self._groups: list[wire.PropertyReference] = []
        self._start_cursor: bytes | None = None
        self._limit: int | None = None
        self._offset: int = 0

    # -- projections ---------------------------------------------------------

    def keys_only(self) -> Query:
        """Return only entity keys, not properties."""
        self._projections.append(KEY_PROPERTY)
        return self

    def properties(self, *names: str | Iterable[str]) -> Query:
        """Only return the given properties (a projection query).

        Accepts names as separate arguments or as a single iterable.
        """
        for name in names:
            if isinstance(name, str):
                self._projections.append(name)
            else:
                self._projections.extend(name)
        return self

    # -- restrictions --------------------------------------------------------

    def kind_of(self, kind: str) -> Query:
        self._kinds.append(kind)
        return self

    def filter_by(self, filter: CompilableFilter) -> Query:
        self._filters.append(filter)
        return self

    def order_by(self, order: Order) -> Query:
        """Add a sort key; earlier calls take precedence."""
        self._orders.append(order.compile())
        return self

    def group_by(self, group: Group) -> Query:
        """Add a distinct-on property; earlier calls take precedence."""
        self._groups.append(group.compile())
        return self

    # -- paging --------------------------------------------------------------

    def from_cursor(self, cursor: bytes) -> Query:
        """
        Resume from a cursor returned by a previous run of this query.
        The last call wins.
        """
        self._start_cursor = cursor
        return self

    def limit(self, limit: int) -> Query:
        """Return at most ``limit`` entities.  The last call wins."""
        self._check_non_negative("limit", limit)
        self._limit = limit
        return self

    def offset(self, offset: int) -> Query:
        """Skip ``offset`` entities.  The last call wins."""
        self._check_non_negative("offset", offset)
        self._offset = offset
        return self

    def clear_offset(self) -> Query:
        self._offset = 0
        return self

    def get_offset(self) -> int:
        return self._offset

    def get_limit(self) -> int | None:
        return self._limit

    # -- read-only views -----------------------------------------------------

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(self._kinds)

    @property
    def projected_properties(self) -> tuple[str, ...]:
        return tuple(self._projections)

    @property
    def filters(self) -> tuple[CompilableFilter, ...]:
        return tuple(self._filters)

    @property
    def orders(self) -> tuple[wire.PropertyOrder, ...]:
        return tuple(self._orders)

    @property
    def groups(self) -> tuple[wire.PropertyReference, ...]:
        return tuple(self._groups)

    @property
    def start_cursor(self) -> bytes | None:
        return self._start_cursor

    # -- compile -------------------------------------------------------------

    def compile(self, namespace: str | None = None) -> wire.WireQuery:
        """
        Produce the wire query for ``namespace``.

        Falls back to ``config.default_namespace`` when no namespace is
        given.  The builder is left untouched.

        Raises:
            QueryCompilationError: If a filter does not compile to a
                wire filter.
        """
        if namespace is None:
            namespace = self.config.default_namespace
        logger.debug(
            "Compiling query: kinds=%d filters=%d orders=%d groups=%d namespace=%r",
            len(self._kinds),
            len(self._filters),
            len(self._orders),
            len(self._groups),
            namespace,
        )
        return wire.WireQuery(
            kinds=tuple(wire.KindExpression(name=k) for k in self._kinds),
            projections=tuple(
                wire.Projection(property=wire.PropertyReference(name=p))
                for p in self._projections
            ),
            filter=compile_filters(self._filters, namespace),
            orders=tuple(self._orders),
            distinct_on=tuple(self._groups),
            start_cursor=self._start_cursor,
            limit=self._limit,
            offset=self._offset,
        )

    def to_request(
        self, namespace: str | None = None, project_id: str | None = None
    ) -> wire.RunQueryRequest:
        """Compile and wrap in a request scoped to the namespace's partition."""
        if namespace is None:
            namespace = self.config.default_namespace
        return wire.RunQueryRequest(
            partition_id=wire.PartitionId(
                project_id=project_id, namespace_id=namespace
            ),
            query=self.compile(namespace),
        )

    def copy(self) -> Query:
        """Return an independent builder with the same accumulated state."""
        clone = Query(self.config)
        clone._kinds = list(self._kinds)
        clone._projections = list(self._projections)
        clone._filters = list(self._filters)
        clone._orders = list(self._orders)
        clone._groups = list(self._groups)
        clone._start_cursor = self._start_cursor
        clone._limit = self._limit
        clone._offset = self._offset
        return clone

    # -- internals -----------------------------------------------------------

    def _check_non_negative(self, field: str, value: int) -> None:
        if self.config.strict and value < 0:
            raise QueryValidationError(
                f"{field} must be >= 0, got {value}", field=field, value=value
            )

    def __repr__(self) -> str:
        return (
            f"Query(kinds={self._kinds!r}, projections={self._projections!r}, "
            f"filters={len(self._filters)}, orders={len(self._orders)}, "
            f"groups={len(self._groups)}, limit={self._limit!r}, "
            f"offset={self._offset!r})"
        )
