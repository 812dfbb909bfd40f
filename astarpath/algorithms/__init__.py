"""Search algorithms.

``search`` and ``find_best_path`` drive a ``Frontier`` and a ``ScoreTable``
over a read-only graph mapping.
"""

from astarpath.algorithms.frontier import Frontier, FrontierEntry
from astarpath.algorithms.score_table import ScoreTable
from astarpath.algorithms.search import astar_score, find_best_path, search

__all__ = [
    "Frontier",
    "FrontierEntry",
    "ScoreTable",
    "astar_score",
    "find_best_path",
    "search",
]
