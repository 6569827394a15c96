"""Tests for wire message models and their JSON form."""

from __future__ import annotations

import base64

import pydantic
import pytest

from cqrs_ddd_datastore import Direction, PropertyOperator, Query, wire
from cqrs_ddd_datastore.builder import desc, eq, group, gt


def test_to_dict_full_query():
    q = (
        Query()
        .kind_of("Player")
        .properties("name")
        .filter_by(eq("team", {"stringValue": "spurs"}))
        .order_by(desc("goals"))
        .group_by(group("position"))
        .from_cursor(b"cursor-1")
        .limit(5)
    )
    d = q.compile().to_dict()
    assert d["kind"] == [{"name": "Player"}]
    assert d["projection"] == [{"property": {"name": "name"}}]
    assert d["filter"] == {
        "propertyFilter": {
            "property": {"name": "team"},
            "op": "EQUAL",
            "value": {"stringValue": "spurs"},
        }
    }
    assert d["order"] == [{"property": {"name": "goals"}, "direction": "DESCENDING"}]
    assert d["distinctOn"] == [{"name": "position"}]
    assert base64.b64decode(d["startCursor"]) == b"cursor-1"
    assert d["limit"] == 5
    assert d["offset"] == 0


def test_to_dict_omits_absent_fields_but_keeps_offset():
    d = Query().kind_of("Player").compile().to_dict()
    assert "filter" not in d
    assert "limit" not in d
    assert "startCursor" not in d
    assert d["offset"] == 0


def test_to_dict_composite_filter():
    d = (
        Query()
        .filter_by(eq("a", {"integerValue": "1"}))
        .filter_by(gt("b", {"integerValue": "2"}))
        .compile()
        .to_dict()
    )
    composite = d["filter"]["compositeFilter"]
    assert composite["op"] == "AND"
    assert [f["propertyFilter"]["property"]["name"] for f in composite["filters"]] == [
        "a",
        "b",
    ]
    assert composite["filters"][1]["propertyFilter"]["op"] == "GREATER_THAN"


def test_run_query_request_to_dict():
    request = Query().kind_of("Player").to_request("tenant", project_id="proj")
    d = request.to_dict()
    assert d["partitionId"] == {"projectId": "proj", "namespaceId": "tenant"}
    assert d["query"]["kind"] == [{"name": "Player"}]


def test_filter_requires_exactly_one_branch():
    with pytest.raises(pydantic.ValidationError):
        wire.Filter()

    leaf = wire.PropertyFilter(
        property=wire.PropertyReference(name="a"),
        op=PropertyOperator.EQUAL,
        value={"booleanValue": True},
    )
    with pytest.raises(pydantic.ValidationError):
        wire.Filter(
            property_filter=leaf,
            composite_filter=wire.CompositeFilter(filters=()),
        )


def test_messages_are_frozen():
    order = wire.PropertyOrder(
        property=wire.PropertyReference(name="a"), direction=Direction.DESCENDING
    )
    with pytest.raises(pydantic.ValidationError):
        order.direction = Direction.ASCENDING  # type: ignore[misc]


def test_wire_query_accepts_camel_case_aliases():
    query = wire.WireQuery.model_validate(
        {"kind": [{"name": "Player"}], "startCursor": b"abc", "offset": 4}
    )
    assert query.kinds == (wire.KindExpression(name="Player"),)
    assert query.start_cursor == b"abc"
    assert query.offset == 4
