"""Sort and distinct-on descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from . import wire
from .operators import Direction


@dataclass(frozen=True)
class Order:
    """Sort results by ``property`` in ``direction``."""

    property: str
    direction: Direction = Direction.ASCENDING

    def compile(self) -> wire.PropertyOrder:
        return wire.PropertyOrder(
            property=wire.PropertyReference(name=self.property),
            direction=self.direction,
        )


@dataclass(frozen=True)
class Group:
    """Deduplicate results on ``property``."""

    property: str

    def compile(self) -> wire.PropertyReference:
        return wire.PropertyReference(name=self.property)
