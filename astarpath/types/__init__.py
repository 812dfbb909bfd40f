"""Shared typing constructs for astarpath.

Defines the graph aliases, search states, result containers and exceptions used
across the package. Contains no search logic.
"""

from astarpath.types.base import (
    Cost,
    DataIntegrityError,
    Edge,
    Graph,
    InvalidInputError,
    NodeEntry,
    PathSearchError,
    SearchLimitExceeded,
    SearchState,
    T,
)
from astarpath.types.dto import SearchResult

__all__ = [
    # Enums
    "SearchState",
    # Type aliases
    "Cost",
    "Edge",
    "Graph",
    "NodeEntry",
    "T",
    # DTOs
    "SearchResult",
    # Exceptions
    "PathSearchError",
    "InvalidInputError",
    "DataIntegrityError",
    "SearchLimitExceeded",
]
