"""Shared graph fixtures.

Graphs are plain dicts of label -> (edges, weight), written out edge by edge so
the edge order the search relaxes is visible in the fixture itself.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import pytest

GridGraph = Dict[int, Tuple[List[Tuple[int, float]], float]]


def build_grid(weights: List[float], width: int) -> GridGraph:
    """Build a 4-connected grid with unit distances.

    Label ``i`` sits at column ``i % width`` and row ``i // width`` with row 0 at
    the bottom. Edges are listed up, right, down, left.
    """
    height = len(weights) // width
    graph: GridGraph = {}
    for label, weight in enumerate(weights):
        col, row = label % width, label // width
        edges: List[Tuple[int, float]] = []
        if row + 1 < height:
            edges.append((label + width, 1.0))
        if col + 1 < width:
            edges.append((label + 1, 1.0))
        if row > 0:
            edges.append((label - width, 1.0))
        if col > 0:
            edges.append((label - 1, 1.0))
        graph[label] = (edges, weight)
    return graph


@pytest.fixture
def readme_graph():
    #                  Length:22             W:4
    #       W:1  S ----------------------> O1
    #           |                         |
    #  Length:5 |                         | Length:4
    #           v                         v
    #           O2 ---------------------> E
    #      W:1          Length:20            W:2
    return {
        "S": ([("O1", 22.0), ("O2", 5.0)], 1.0),
        "O1": ([("E", 4.0)], 4.0),
        "O2": ([("E", 20.0)], 1.0),
        "E": ([], 2.0),
    }


@pytest.fixture
def grid_graph():
    # _______________________
    # | L:12| L:13| L:14| L:15|
    # | W:1 | W:7 | W:6 | W:8 |
    # |_____|_____|_____|_____|
    # | L:8 | L:9 | L:10| L:11|
    # | W:3 | W:2 | W:4 | W:5 |
    # |_____|_____|_____|_____|
    # | L:4 | L:5 | L:6 | L:7 |
    # | W:2 | W:3 | W:9 | W:1 |
    # |_____|_____|_____|_____|
    # | L:0 | L:1 | L:2 | L:3 |
    # | W:1 | W:3 | W:1 | W:7 |
    # |_____|_____|_____|_____|
    weights = [1, 3, 1, 7, 2, 3, 9, 1, 3, 2, 4, 5, 1, 7, 6, 8]
    return build_grid([float(w) for w in weights], width=4)


@pytest.fixture
def unreachable_graph():
    # 5 has an edge into 4 but nothing leads to 5
    return {
        0: ([(1, 5.0)], 3.0),
        1: ([(0, 5.0), (2, 3.0)], 2.0),
        2: ([(1, 3.0), (3, 2.0), (4, 1.0)], 1.0),
        3: ([(2, 2.0)], 5.0),
        4: ([(2, 1.0)], 2.0),
        5: ([(4, 3.0)], 6.0),
    }


def _hex_graph(weight_30: float):
    #                 _________               _________
    #                /         \             /         \
    #               /           \           /           \
    #     _________/    (1,3)    \_________/    (3,3)    \
    #    /         \             /         \             /
    #   /           \    W:2    /           \    W:2    /
    #  /    (0,3)    \_________/    (2,3)    \_________/
    #  \             /         \             /         \
    #   \    W:3    /           \    W:9    /           \
    #    \_________/    (1,2)    \_________/    (3,2)    \
    #    /         \             /         \             /
    #   /           \    W:4    /           \    W:5    /
    #  /    (0,2)    \_________/    (2,2)    \_________/
    #  \             /         \             /         \
    #   \    W:1    /           \    W:8    /           \
    #    \_________/    (1,1)    \_________/    (3,1)    \
    #    /         \             /         \             /
    #   /           \    W:9    /           \    W:4    /
    #  /    (0,1)    \_________/    (2,1)    \_________/
    #  \             /         \             /         \
    #   \    W:1    /           \    W:6    /           \
    #    \_________/    (1,0)    \_________/    (3,0)    \
    #    /         \             /         \             /
    #   /           \    W:2    /           \    W:?    /
    #  /    (0,0)    \_________/    (2,0)    \_________/
    #  \             /         \             /
    #   \    W:1    /           \    W:2    /
    #    \_________/             \_________/
    return {
        (0, 0): ([((0, 1), 1.0), ((1, 0), 1.0)], 1.0),
        (0, 1): ([((0, 2), 1.0), ((1, 1), 1.0), ((1, 0), 1.0), ((0, 0), 1.0)], 1.0),
        (0, 2): ([((0, 3), 1.0), ((1, 2), 1.0), ((1, 1), 1.0), ((0, 1), 1.0)], 1.0),
        (0, 3): ([((1, 3), 1.0), ((1, 2), 1.0), ((0, 2), 1.0)], 3.0),
        (1, 0): (
            [((1, 1), 1.0), ((2, 1), 1.0), ((2, 0), 1.0), ((0, 0), 1.0), ((0, 1), 1.0)],
            2.0,
        ),
        (1, 1): (
            [
                ((1, 2), 1.0),
                ((2, 2), 1.0),
                ((2, 1), 1.0),
                ((1, 0), 1.0),
                ((0, 1), 1.0),
                ((0, 2), 1.0),
            ],
            9.0,
        ),
        (1, 2): (
            [
                ((1, 3), 1.0),
                ((2, 3), 1.0),
                ((2, 2), 1.0),
                ((1, 1), 1.0),
                ((0, 2), 1.0),
                ((0, 3), 1.0),
            ],
            4.0,
        ),
        (1, 3): ([((2, 3), 1.0), ((1, 2), 1.0), ((0, 3), 1.0)], 2.0),
        (2, 0): ([((2, 1), 1.0), ((3, 0), 1.0), ((1, 0), 1.0)], 2.0),
        (2, 1): (
            [
                ((2, 2), 1.0),
                ((3, 1), 1.0),
                ((3, 0), 1.0),
                ((2, 0), 1.0),
                ((1, 0), 1.0),
                ((1, 1), 1.0),
            ],
            6.0,
        ),
        (2, 2): (
            [
                ((2, 3), 1.0),
                ((3, 2), 1.0),
                ((3, 1), 1.0),
                ((2, 1), 1.0),
                ((1, 1), 1.0),
                ((1, 2), 1.0),
            ],
            8.0,
        ),
        (2, 3): (
            [((3, 3), 1.0), ((3, 2), 1.0), ((2, 2), 1.0), ((1, 2), 1.0), ((1, 3), 1.0)],
            9.0,
        ),
        (3, 0): ([((3, 1), 1.0), ((2, 0), 1.0), ((2, 1), 1.0)], weight_30),
        (3, 1): ([((3, 2), 1.0), ((3, 0), 1.0), ((2, 1), 1.0), ((2, 2), 1.0)], 4.0),
        (3, 2): ([((3, 3), 1.0), ((3, 1), 1.0), ((2, 2), 1.0), ((2, 3), 1.0)], 5.0),
        (3, 3): ([((3, 2), 1.0), ((2, 3), 1.0)], 2.0),
    }


@pytest.fixture
def hex_graph_up_right():
    """Hex grid searched from (0,0) to (3,3); (3,0) has weight 3."""
    return _hex_graph(weight_30=3.0)


@pytest.fixture
def hex_graph_down_left():
    """Same hex grid searched from (3,3) to (0,0); (3,0) has weight 7."""
    return _hex_graph(weight_30=7.0)
