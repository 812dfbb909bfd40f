"""Result containers for best-path search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional

from astarpath.types.base import Cost, SearchState, T


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Outcome of a single search call.

    Attributes:
        state: Terminal state, either ``FOUND`` or ``EXHAUSTED``.
        path: Labels from start to end inclusive, or None when exhausted.
        score: Score of the winning frontier entry (None when exhausted).
        distance: Accumulated edge distance of the winning path (None when exhausted).
        expansions: Number of frontier entries popped and expanded.
    """

    state: SearchState
    path: Optional[List[T]] = None
    score: Optional[Cost] = None
    distance: Optional[Cost] = None
    expansions: int = 0

    @property
    def found(self) -> bool:
        """Return True when a path to the end label was found."""
        return self.state == SearchState.FOUND

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation.

        Tuple labels are emitted as lists by ``json``; other labels are kept as-is.
        """
        return {
            "state": self.state.name,
            "path": list(self.path) if self.path is not None else None,
            "score": self.score,
            "distance": self.distance,
            "expansions": self.expansions,
        }
