"""Open set of candidate partial paths for the best-path search.

The frontier is a plain list kept in ascending score order by a stable sort
after every expansion. Removing the head swaps the last entry into the vacated
slot, so among equal scores the entry that was last in the list is consulted
first after the next sort. Together with the ``>=`` replacement rule in
``upsert_or_push`` this fixes which of several equal-score paths is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List

from astarpath.types.base import Cost, T


@dataclass
class FrontierEntry(Generic[T]):
    """A candidate partial path waiting to be expanded.

    Attributes:
        label: Node reached by this candidate.
        score: Accumulated distance plus the weight of ``label``.
        path: Previously visited labels, excluding ``label`` itself.
        distance: Accumulated edge distance from the start to ``label``.
    """

    label: T
    score: Cost
    path: List[T] = field(default_factory=list)
    distance: Cost = 0.0


class Frontier(Generic[T]):
    """Candidate paths consulted in ascending score order."""

    def __init__(self) -> None:
        self._entries: List[FrontierEntry[T]] = []

    def push(self, entry: FrontierEntry[T]) -> None:
        """Append a new candidate."""
        self._entries.append(entry)

    def upsert_or_push(
        self, label: T, score: Cost, path: List[T], distance: Cost
    ) -> None:
        """Replace a queued candidate for ``label`` or queue a new one.

        A queued entry for ``label`` whose score is greater than or equal to
        ``score`` is overwritten in place. A queued entry with a strictly
        better score is kept and the new candidate is dropped. Only when no
        entry for ``label`` is queued is a new entry appended.

        Args:
            label: Node reached by the candidate.
            score: Candidate score.
            path: Labels visited before ``label``.
            distance: Accumulated edge distance to ``label``.
        """
        matched = False
        for entry in self._entries:
            if entry.label != label:
                continue
            matched = True
            if entry.score >= score:
                entry.score = score
                entry.path = list(path)
                entry.distance = distance
        if not matched:
            self._entries.append(FrontierEntry(label, score, list(path), distance))

    def sort(self) -> None:
        """Stable-sort the entries by ascending score."""
        self._entries.sort(key=lambda entry: entry.score)

    def peek(self) -> FrontierEntry[T]:
        """Return the head entry without removing it.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._entries:
            raise IndexError("peek from an empty frontier")
        return self._entries[0]

    def pop_best(self) -> FrontierEntry[T]:
        """Remove and return the head entry.

        The last entry is moved into the head slot; call ``sort()`` before the
        next ``peek()`` or ``pop_best()``.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._entries:
            raise IndexError("pop from an empty frontier")
        head = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
        return head

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
