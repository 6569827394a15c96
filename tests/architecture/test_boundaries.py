from pytest_archon import archrule


def test_wire_independence() -> None:
    """
    Wire messages are the boundary artifact.
    They must not depend on the builder or the filter units that produce them.
    """
    (
        archrule("wire_is_independent")
        .match("cqrs_ddd_datastore.wire")
        .should_not_import("cqrs_ddd_datastore.query")
        .should_not_import("cqrs_ddd_datastore.builder")
        .should_not_import("cqrs_ddd_datastore.filters")
        .should_not_import("cqrs_ddd_datastore.orders")
        .check("cqrs_ddd_datastore")
    )


def test_collaborators_do_not_import_builder() -> None:
    """
    Filters, orders and keys are compiled by the query builder.
    They must not import it back.
    """
    (
        archrule("collaborators_layering")
        .match("cqrs_ddd_datastore.filters")
        .match("cqrs_ddd_datastore.orders")
        .match("cqrs_ddd_datastore.keys")
        .match("cqrs_ddd_datastore.composer")
        .should_not_import("cqrs_ddd_datastore.query")
        .should_not_import("cqrs_ddd_datastore.builder")
        .check("cqrs_ddd_datastore")
    )


def test_operators_isolation() -> None:
    """
    Operators are the lowest level.
    They must not import any other module of the package.
    """
    (
        archrule("operators_isolation")
        .match("cqrs_ddd_datastore.operators")
        .should_not_import("cqrs_ddd_datastore.*")
        .check("cqrs_ddd_datastore")
    )
