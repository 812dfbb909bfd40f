"""Per-label best score bookkeeping for the best-path search."""

from __future__ import annotations

from typing import Dict, Generic, Optional

from astarpath.types.base import Cost, T


class ScoreTable(Generic[T]):
    """Lowest score computed so far for every label touched by one search.

    Scores only ever move downward. A candidate that ties the recorded score is
    accepted, so the most recently discovered equal-score path displaces the
    earlier one.
    """

    def __init__(self) -> None:
        self._scores: Dict[T, Cost] = {}

    def seed(self, start: T, weight: Cost) -> None:
        """Record the start label's score, which is just its own weight."""
        self._scores[start] = weight

    def best_known(self, label: T) -> Optional[Cost]:
        """Return the recorded score for ``label`` or None if it was never scored."""
        return self._scores.get(label)

    def record_if_better(self, label: T, candidate: Cost) -> bool:
        """Store ``candidate`` if it is no worse than the recorded score.

        Args:
            label: Node being reached.
            candidate: Score of the newly discovered path to ``label``.

        Returns:
            True if the candidate was stored and should be explored, False if a
            strictly better score is already recorded.
        """
        recorded = self._scores.get(label)
        if recorded is not None and candidate > recorded:
            return False
        self._scores[label] = candidate
        return True

    def __len__(self) -> int:
        return len(self._scores)
