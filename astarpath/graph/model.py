"""Checks and measurements over the plain graph mapping.

The search accepts any ``Mapping[label, (edges, weight)]`` and only fails when
it actually touches a dangling reference. These helpers let callers check a
whole graph up front and measure the paths the search returns.
"""

from __future__ import annotations

from typing import Sequence, Set

from astarpath.types.base import Cost, DataIntegrityError, Graph, T


def missing_labels(graph: Graph[T]) -> Set[T]:
    """Return labels referenced by some edge but absent from ``graph``."""
    missing: Set[T] = set()
    for edges, _weight in graph.values():
        for neighbor, _distance in edges:
            if neighbor not in graph:
                missing.add(neighbor)
    return missing


def validate_graph(graph: Graph[T]) -> None:
    """Check that ``graph`` is complete and has no negative distances.

    Args:
        graph: Mapping of label -> (edges, weight).

    Raises:
        DataIntegrityError: If any edge references a label absent from ``graph``.
            ``missing`` holds every such label; ``label`` and ``referenced_by``
            describe the first dangling edge in iteration order.
        ValueError: If any edge distance is negative.
    """
    first_dangling = None
    for label, (edges, _weight) in graph.items():
        for neighbor, distance in edges:
            if distance < 0:
                raise ValueError(
                    f"Edge {label!r} -> {neighbor!r} has negative distance {distance}"
                )
            if first_dangling is None and neighbor not in graph:
                first_dangling = (neighbor, label)

    if first_dangling is not None:
        neighbor, label = first_dangling
        raise DataIntegrityError(
            neighbor, referenced_by=label, missing=missing_labels(graph)
        )


def path_distance(graph: Graph[T], path: Sequence[T]) -> Cost:
    """Return the summed edge distance along ``path``.

    For parallel edges the shortest one is used; the search keeps the
    cheapest of several edges into the same node.

    Raises:
        ValueError: If ``path`` is empty or a hop is not an edge of ``graph``.
        KeyError: If a label on ``path`` is not in ``graph``.
    """
    if not path:
        raise ValueError("Cannot measure an empty path")
    total: Cost = 0.0
    for u, v in zip(path, path[1:]):
        hops = [distance for neighbor, distance in graph[u][0] if neighbor == v]
        if not hops:
            raise ValueError(f"No edge {u!r} -> {v!r} in graph")
        total += min(hops)
    return total


def path_score(graph: Graph[T], path: Sequence[T]) -> Cost:
    """Return distance along ``path`` plus the weight of its last node."""
    return path_distance(graph, path) + graph[path[-1]][1]
