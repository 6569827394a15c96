"""Entity keys usable as namespace-scoped filter operands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import QueryValidationError

PathElement = tuple[str, int | str | None]


@dataclass(frozen=True)
class Key:
    """
    An entity key: an ancestor path of ``(kind, id_or_name)`` elements.

    A key without its own ``namespace`` is scoped to whatever namespace
    the enclosing query is compiled against, so the same key can be
    replayed against several namespaces.

    Example::

        Key.of("Team", "spurs", "Player", 7)
        # Team:spurs / Player:7
    """

    path: tuple[PathElement, ...]
    namespace: str | None = None

    def __post_init__(self) -> None:
        if not self.path:
            raise QueryValidationError("Key path must not be empty", field="path")
        for index, (kind, id_or_name) in enumerate(self.path):
            if not kind:
                raise QueryValidationError(
                    f"Key path element {index} has an empty kind",
                    field="path",
                    value=kind,
                )
            if isinstance(id_or_name, bool) or not isinstance(
                id_or_name, int | str | None
            ):
                raise QueryValidationError(
                    "Key ids must be integers or strings",
                    field="path",
                    value=id_or_name,
                )
            if id_or_name is None and index != len(self.path) - 1:
                raise QueryValidationError(
                    "Only the last key path element may omit its id or name",
                    field="path",
                    value=self.path,
                )

    @classmethod
    def of(cls, *parts: Any, namespace: str | None = None) -> Key:
        """Build a key from alternating kind and id-or-name arguments."""
        if not parts or len(parts) % 2:
            raise QueryValidationError(
                "Key.of() expects kind/id-or-name pairs", field="path", value=parts
            )
        path = tuple(zip(parts[0::2], parts[1::2]))
        return cls(path=path, namespace=namespace)

    @property
    def kind(self) -> str:
        return self.path[-1][0]

    @property
    def name_or_id(self) -> int | str | None:
        return self.path[-1][1]

    @property
    def parent(self) -> Key | None:
        if len(self.path) == 1:
            return None
        return Key(path=self.path[:-1], namespace=self.namespace)

    def to_value(self, namespace: str | None) -> dict[str, Any]:
        """Render as a key value, scoped to ``namespace`` unless pinned."""
        key: dict[str, Any] = {"path": [_element(kind, v) for kind, v in self.path]}
        effective = self.namespace if self.namespace is not None else namespace
        if effective is not None:
            key["partitionId"] = {"namespaceId": effective}
        return {"keyValue": key}


def _element(kind: str, id_or_name: int | str | None) -> dict[str, Any]:
    if isinstance(id_or_name, int):
        # int64 ids travel as strings in the JSON API
        return {"kind": kind, "id": str(id_or_name)}
    if id_or_name is None:
        return {"kind": kind}
    return {"kind": kind, "name": id_or_name}
