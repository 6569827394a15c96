"""Shared fixtures for datastore query tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_datastore import Query, wire
from cqrs_ddd_datastore.operators import PropertyOperator


def property_fragment(name: str, value: str = "x") -> wire.Filter:
    return wire.Filter(
        property_filter=wire.PropertyFilter(
            property=wire.PropertyReference(name=name),
            op=PropertyOperator.EQUAL,
            value={"stringValue": value},
        )
    )


class StubFilter:
    """Filter unit that records the namespaces it was compiled with."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.namespaces: list[str | None] = []

    def compile(self, namespace: str | None) -> wire.Filter:
        self.namespaces.append(namespace)
        return property_fragment(self.name, value=namespace or "")


@pytest.fixture
def query() -> Query:
    return Query()


@pytest.fixture
def stub_filter():
    return StubFilter


@pytest.fixture
def make_fragment():
    return property_fragment
