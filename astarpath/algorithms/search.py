"""Best-path search combining travel distance with per-node weights.

Every candidate is ranked by its score: the distance travelled so far plus the
static weight of the node it ends on. Lower is better. The weight is not a
distance-to-goal estimate, so the returned path is the best one this ranking
discovers rather than a guaranteed shortest-cost route.

Notes:
    The loop stops as soon as an entry for the end label sits at the head of
    the frontier; the end node itself is never expanded. When several paths
    tie, the most recently discovered one wins (see ``ScoreTable`` and
    ``Frontier``).
"""

from __future__ import annotations

from typing import List, Optional

from astarpath.algorithms.frontier import Frontier, FrontierEntry
from astarpath.algorithms.score_table import ScoreTable
from astarpath.config import SEARCH_CONFIG, SearchConfig
from astarpath.logging import get_logger
from astarpath.types.base import (
    Cost,
    DataIntegrityError,
    Graph,
    InvalidInputError,
    SearchLimitExceeded,
    SearchState,
    T,
)
from astarpath.types.dto import SearchResult

logger = get_logger(__name__)


def astar_score(distance: Cost, weight: Cost) -> Cost:
    """Return the rank of a candidate path; lower scores are better."""
    return distance + weight


def _expand(
    current: FrontierEntry[T],
    graph: Graph[T],
    scores: ScoreTable[T],
    frontier: Frontier[T],
) -> None:
    """Relax every outgoing edge of ``current`` into the frontier."""
    edges = graph[current.label][0]
    new_path = current.path + [current.label]
    for neighbor, edge_distance in edges:
        neighbor_entry = graph.get(neighbor)
        if neighbor_entry is None:
            raise DataIntegrityError(neighbor, referenced_by=current.label)
        distance = current.distance + edge_distance
        score = astar_score(distance, neighbor_entry[1])
        if scores.record_if_better(neighbor, score):
            frontier.upsert_or_push(neighbor, score, new_path, distance)


def search(
    start: T,
    graph: Graph[T],
    end: T,
    config: Optional[SearchConfig] = None,
) -> SearchResult[T]:
    """Search ``graph`` for the best-scoring path from ``start`` to ``end``.

    Args:
        start: Label to start from. Must be a key of ``graph``.
        graph: Mapping of label -> (ordered edges, node weight). Each edge is a
            ``(neighbor_label, distance)`` pair. Read-only during the call.
        end: Label to reach. Must be a key of ``graph``.
        config: Optional limits; defaults to ``SEARCH_CONFIG``.

    Returns:
        SearchResult with ``state`` FOUND and the path from ``start`` to ``end``
        inclusive, or ``state`` EXHAUSTED and ``path`` None when the frontier
        empties without reaching ``end``.

    Raises:
        InvalidInputError: If ``start`` or ``end`` is not in ``graph``.
        DataIntegrityError: If an expanded edge references a label not in ``graph``.
        SearchLimitExceeded: If ``config.max_expansions`` is exceeded.
    """
    cfg = config if config is not None else SEARCH_CONFIG

    if start not in graph:
        raise InvalidInputError(start, "start")
    if end not in graph:
        raise InvalidInputError(end, "end")

    start_weight = graph[start][1]
    logger.debug(
        f"Searching {start!r} -> {end!r} over {len(graph)} nodes "
        f"(start weight {start_weight})"
    )

    scores: ScoreTable[T] = ScoreTable()
    scores.seed(start, start_weight)

    frontier: Frontier[T] = Frontier()
    frontier.push(FrontierEntry(start, start_weight, [], 0.0))

    limit: Optional[int] = cfg.max_expansions
    state = SearchState.EXPLORING
    expansions = 0
    while state == SearchState.EXPLORING:
        if frontier.peek().label == end:
            state = SearchState.FOUND
            break

        current = frontier.pop_best()
        expansions += 1
        if limit is not None and expansions > limit:
            raise SearchLimitExceeded(expansions, limit)
        if cfg.log_progress_every and expansions % cfg.log_progress_every == 0:
            logger.debug(
                f"Expanded {expansions} entries; frontier size {len(frontier)}, "
                f"current {current.label!r} at score {current.score}"
            )

        _expand(current, graph, scores, frontier)
        frontier.sort()

        if frontier.is_empty():
            state = SearchState.EXHAUSTED

    if state == SearchState.EXHAUSTED:
        logger.debug(
            f"No path from {start!r} to {end!r} after {expansions} expansions "
            f"({len(scores)} nodes scored)"
        )
        return SearchResult(state=state, expansions=expansions)

    winner = frontier.peek()
    path: List[T] = winner.path + [end]
    logger.debug(
        f"Found path {start!r} -> {end!r} with {len(path)} nodes, "
        f"score {winner.score}, after {expansions} expansions "
        f"({len(scores)} nodes scored)"
    )
    return SearchResult(
        state=state,
        path=path,
        score=winner.score,
        distance=winner.distance,
        expansions=expansions,
    )


def find_best_path(start: T, graph: Graph[T], end: T) -> Optional[List[T]]:
    """Return the best-scoring path from ``start`` to ``end``, or None.

    Thin wrapper over ``search`` for callers that only need the labels. A found
    path always contains at least ``[start]``, so None unambiguously means that
    ``end`` is unreachable.

    Raises:
        InvalidInputError: If ``start`` or ``end`` is not in ``graph``.
        DataIntegrityError: If an expanded edge references a label not in ``graph``.
    """
    return search(start, graph, end).path
