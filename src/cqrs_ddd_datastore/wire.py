"""
Immutable wire-level query messages.

These models mirror the store's v1 RPC query message.  They are produced
by :meth:`Query.compile` and consumed by a transport, which typically
sends ``to_dict()`` as the JSON body of a ``runQuery`` call.  Field names
are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .operators import CompositeOperator, Direction, PropertyOperator


class WireMessage(BaseModel):
    """Base class for wire messages.

    Messages are frozen; ``to_dict()`` omits unset optional fields and
    encodes bytes as base64, as the store's JSON API expects.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        ser_json_bytes="base64",
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class KindExpression(WireMessage):
    name: str


class PropertyReference(WireMessage):
    name: str


class Projection(WireMessage):
    property: PropertyReference


class PropertyOrder(WireMessage):
    property: PropertyReference
    direction: Direction = Direction.ASCENDING


class PropertyFilter(WireMessage):
    property: PropertyReference
    op: PropertyOperator
    value: dict[str, Any]


class CompositeFilter(WireMessage):
    op: CompositeOperator = CompositeOperator.AND
    filters: tuple[Filter, ...] = ()


class Filter(WireMessage):
    """A filter node: exactly one of a property or a composite filter."""

    property_filter: PropertyFilter | None = None
    composite_filter: CompositeFilter | None = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> Filter:
        if (self.property_filter is None) == (self.composite_filter is None):
            raise ValueError(
                "Filter requires exactly one of property_filter or composite_filter"
            )
        return self


class WireQuery(WireMessage):
    """
    The compiled query.

    Attributes:
        kinds: Kinds to draw entities from.
        projections: Properties to return; empty means whole entities.
        filter: Absent, a single filter, or an AND composite.
        orders: Sort keys in precedence order.
        distinct_on: Properties results are deduplicated on.
        start_cursor: Opaque resumption token from a previous run.
        limit: Maximum number of results; ``None`` means unbounded.
        offset: Number of results to skip; always transmitted.
    """

    kinds: tuple[KindExpression, ...] = Field(default=(), alias="kind")
    projections: tuple[Projection, ...] = Field(default=(), alias="projection")
    filter: Filter | None = None
    orders: tuple[PropertyOrder, ...] = Field(default=(), alias="order")
    distinct_on: tuple[PropertyReference, ...] = ()
    start_cursor: bytes | None = None
    limit: int | None = None
    offset: int = 0


class PartitionId(WireMessage):
    project_id: str | None = None
    namespace_id: str | None = None


class RunQueryRequest(WireMessage):
    """Request envelope scoping a compiled query to a partition."""

    partition_id: PartitionId
    query: WireQuery


CompositeFilter.model_rebuild()
