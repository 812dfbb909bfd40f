"""Base aliases, enums and exceptions for best-path search."""

from __future__ import annotations

from enum import IntEnum
from typing import (
    FrozenSet,
    Hashable,
    Iterable,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

#: Represents numeric cost in the graph (distance, weight or score).
Cost = Union[int, float]

#: Caller-chosen node identifier. Any hashable value with a readable ``repr``.
T = TypeVar("T", bound=Hashable)

#: Outgoing connection of a node: ``(neighbor_label, distance)``.
Edge = Tuple[T, Cost]

#: Per-node record: ``(ordered edges, node weight)``.
NodeEntry = Tuple[Sequence[Edge[T]], Cost]

#: Complete input graph: label -> (edges, weight).
Graph = Mapping[T, NodeEntry[T]]


class SearchState(IntEnum):
    """States of the best-path search loop."""

    #: Frontier still holds candidates and the end label has not reached its head.
    EXPLORING = 1
    #: The end label reached the head of the frontier.
    FOUND = 2
    #: The frontier emptied before the end label was reached.
    EXHAUSTED = 3


class PathSearchError(Exception):
    """Base class for failures raised by the search and its graph helpers."""


class InvalidInputError(PathSearchError, KeyError):
    """Start or end label is absent from the graph."""

    def __init__(self, label: Hashable, role: str) -> None:
        self.label = label
        self.role = role
        super().__init__(f"Graph does not contain {role} node {label!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class DataIntegrityError(PathSearchError, KeyError):
    """An edge references a label that has no entry in the graph."""

    def __init__(
        self,
        label: Hashable,
        referenced_by: Optional[Hashable] = None,
        missing: Optional[Iterable[Hashable]] = None,
    ) -> None:
        self.label = label
        self.referenced_by = referenced_by
        self.missing: FrozenSet[Hashable] = frozenset(
            missing if missing is not None else (label,)
        )
        if len(self.missing) > 1:
            listed = ", ".join(sorted(repr(m) for m in self.missing))
            message = f"Nodes {listed} are referenced by edges but are not in the graph"
        elif referenced_by is None:
            message = f"Node {label!r} is referenced by an edge but is not in the graph"
        else:
            message = (
                f"Node {label!r} is referenced by an edge of {referenced_by!r} "
                "but is not in the graph"
            )
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class SearchLimitExceeded(PathSearchError):
    """The search popped more frontier entries than the configured cap allows."""

    def __init__(self, expansions: int, limit: int) -> None:
        self.expansions = expansions
        self.limit = limit
        super().__init__(
            f"Search exceeded max_expansions={limit} after {expansions} expansions"
        )
