"""astarpath: best-path search over weighted, labeled graphs.

A graph is a plain mapping of label -> (edges, weight), where edges is an
ordered list of (neighbor, distance) pairs and weight is the node's traversal
difficulty. Candidates are ranked by distance travelled plus the weight of the
node they end on.

Primary API:
    find_best_path() - Path from start to end, or None when unreachable
    search() - Same search returning a SearchResult with score and statistics
    from_networkx() / to_networkx() - Convert to and from NetworkX graphs
    load_graph_yaml() / load_graph_file() - Read graph documents

Example:
    from astarpath import find_best_path

    graph = {
        "S": ([("O1", 22.0), ("O2", 5.0)], 1.0),
        "O1": ([("E", 4.0)], 4.0),
        "O2": ([("E", 20.0)], 1.0),
        "E": ([], 2.0),
    }
    find_best_path("S", graph, "E")  # ['S', 'O2', 'E']
"""

from __future__ import annotations

from astarpath import cli, logging
from astarpath._version import __version__
from astarpath.algorithms import Frontier, FrontierEntry, ScoreTable
from astarpath.algorithms.search import find_best_path, search
from astarpath.config import SEARCH_CONFIG, SearchConfig
from astarpath.graph import (
    from_networkx,
    missing_labels,
    path_distance,
    path_score,
    to_networkx,
    validate_graph,
)
from astarpath.io import (
    graph_from_dict,
    graph_to_dict,
    load_graph_file,
    load_graph_yaml,
)
from astarpath.types import (
    DataIntegrityError,
    InvalidInputError,
    PathSearchError,
    SearchLimitExceeded,
    SearchResult,
    SearchState,
)

__all__ = [
    # Version
    "__version__",
    # Search (primary API)
    "find_best_path",
    "search",
    "SearchResult",
    "SearchState",
    "Frontier",
    "FrontierEntry",
    "ScoreTable",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "PathSearchError",
    "InvalidInputError",
    "DataIntegrityError",
    "SearchLimitExceeded",
    # Graph helpers
    "missing_labels",
    "validate_graph",
    "path_distance",
    "path_score",
    "from_networkx",
    "to_networkx",
    # Documents
    "graph_from_dict",
    "graph_to_dict",
    "load_graph_yaml",
    "load_graph_file",
    # Utilities
    "cli",
    "logging",
]
