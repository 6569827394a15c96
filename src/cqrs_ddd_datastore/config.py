"""Query builder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Configuration shared by query builders.

    Attributes:
        default_namespace: Namespace used when ``compile()`` is called
            without one. ``None`` leaves the partition unset.
        strict: If True, ``limit()`` and ``offset()`` reject negative
            values with :class:`QueryValidationError`. If False, values
            are recorded as given and rejection is left to the store.
    """

    default_namespace: str | None = None
    strict: bool = False
