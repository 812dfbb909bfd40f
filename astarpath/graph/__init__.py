"""Graph helpers.

The search consumes a plain mapping of label -> (edges, weight). This package
provides whole-graph checks and path measurements (`model`) and conversion to
and from NetworkX (`convert`).
"""

from astarpath.graph.convert import from_networkx, to_networkx
from astarpath.graph.model import (
    missing_labels,
    path_distance,
    path_score,
    validate_graph,
)

__all__ = [
    "from_networkx",
    "missing_labels",
    "path_distance",
    "path_score",
    "to_networkx",
    "validate_graph",
]
