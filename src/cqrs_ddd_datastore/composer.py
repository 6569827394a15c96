"""
Collapse accumulated filters into the query's single filter field.

Zero fragments produce no filter, one fragment is used as-is (some
backends reject a composite with a single child) and two or more are
wrapped in an AND composite, preserving accumulation order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import wire
from .exceptions import QueryCompilationError
from .filters import CompilableFilter
from .operators import CompositeOperator

if TYPE_CHECKING:
    from collections.abc import Sequence


def compose_filters(fragments: Sequence[wire.Filter]) -> wire.Filter | None:
    """Combine compiled fragments: none, the one, or AND of all."""
    if not fragments:
        return None
    if len(fragments) == 1:
        return fragments[0]
    return wire.Filter(
        composite_filter=wire.CompositeFilter(
            op=CompositeOperator.AND,
            filters=tuple(fragments),
        )
    )


def compile_filters(
    filters: Sequence[CompilableFilter], namespace: str | None
) -> wire.Filter | None:
    """Compile each filter for ``namespace`` and compose the results."""
    fragments: list[wire.Filter] = []
    for index, unit in enumerate(filters):
        if not isinstance(unit, CompilableFilter):
            raise QueryCompilationError(
                f"Filter {unit!r} at position {index} has no compile() method",
                index=index,
            )
        fragment = unit.compile(namespace)
        if not isinstance(fragment, wire.Filter):
            raise QueryCompilationError(
                f"Filter {unit!r} at position {index} compiled to "
                f"{type(fragment).__name__}, expected Filter",
                index=index,
            )
        fragments.append(fragment)
    return compose_filters(fragments)
