"""
Datastore query exception hierarchy.

All exceptions inherit from ``DatastoreQueryError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class DatastoreQueryError(Exception):
    """Base exception for all datastore query errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class QueryValidationError(DatastoreQueryError):
    """Builder input rejected before it reached the store."""

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "field": self.field,
            "value": self.value,
        }


class QueryCompilationError(DatastoreQueryError):
    """
    A filter unit failed to render a wire filter fragment.

    ``index`` is the position of the offending filter in accumulation order.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        self.message = message
        self.index = index
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "COMPILATION_ERROR",
            "message": self.message,
            "index": self.index,
        }
