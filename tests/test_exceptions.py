"""Tests for the exception hierarchy."""

from __future__ import annotations

from cqrs_ddd_datastore import (
    DatastoreQueryError,
    QueryCompilationError,
    QueryValidationError,
)


def test_hierarchy():
    assert issubclass(QueryValidationError, DatastoreQueryError)
    assert issubclass(QueryCompilationError, DatastoreQueryError)


def test_base_to_dict():
    err = DatastoreQueryError("boom")
    assert err.to_dict() == {"error": "DatastoreQueryError", "message": "boom"}


def test_validation_error_to_dict():
    err = QueryValidationError("limit must be >= 0, got -1", field="limit", value=-1)
    assert str(err) == "limit must be >= 0, got -1"
    assert err.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "limit must be >= 0, got -1",
        "field": "limit",
        "value": -1,
    }


def test_compilation_error_to_dict():
    err = QueryCompilationError("bad filter", index=2)
    assert err.to_dict() == {
        "error": "COMPILATION_ERROR",
        "message": "bad filter",
        "index": 2,
    }
