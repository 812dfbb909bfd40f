"""Graph conversion utilities between the search graph mapping and NetworkX.

``from_networkx`` reads a node attribute as the node weight and an edge
attribute as the edge distance. ``to_networkx`` writes them back onto a
``networkx.DiGraph`` so the result can be inspected or drawn with NetworkX
tooling.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Tuple

import networkx as nx

from astarpath.types.base import Cost, Graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    distance_attr: str = "distance",
    default_weight: Cost = 0.0,
    default_distance: Cost = 1.0,
) -> Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]]:
    """Convert a NetworkX graph into the search graph mapping.

    Directed graphs keep edge direction. Undirected graphs yield one edge in
    each direction. For multigraphs every parallel edge is kept in key order.
    Edge lists follow NetworkX adjacency order, which is insertion order.

    Args:
        nx_graph: Any NetworkX graph.
        weight_attr: Node attribute holding the node weight.
        distance_attr: Edge attribute holding the edge distance.
        default_weight: Weight used when a node lacks ``weight_attr``.
        default_distance: Distance used when an edge lacks ``distance_attr``.

    Returns:
        Mapping of node -> (list of (neighbor, distance), weight).

    Raises:
        ValueError: If a distance is negative.
    """
    graph: Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]] = {}
    for node, node_data in nx_graph.nodes(data=True):
        graph[node] = ([], node_data.get(weight_attr, default_weight))

    for u, neighbors in nx_graph.adjacency():
        edges = graph[u][0]
        for v, edge_data in neighbors.items():
            # Multigraph adjacency maps key -> attrs; simple graphs map straight to attrs
            attr_dicts = (
                list(edge_data.values()) if nx_graph.is_multigraph() else [edge_data]
            )
            for attrs in attr_dicts:
                distance = attrs.get(distance_attr, default_distance)
                if distance < 0:
                    raise ValueError(
                        f"Edge {u!r} -> {v!r} has negative {distance_attr} {distance}"
                    )
                edges.append((v, distance))
    return graph


def to_networkx(
    graph: Graph[Any],
    weight_attr: str = "weight",
    distance_attr: str = "distance",
) -> nx.DiGraph:
    """Convert a search graph mapping to a NetworkX DiGraph.

    Parallel edges collapse into one DiGraph edge carrying the shortest
    distance, which is the one the search ends up using.

    Args:
        graph: Mapping of label -> (edges, weight).
        weight_attr: Node attribute to store the node weight under.
        distance_attr: Edge attribute to store the edge distance under.

    Returns:
        A DiGraph with one node per label. Dangling edge targets become nodes
        without a weight attribute.
    """
    nx_graph = nx.DiGraph()
    for label, (_edges, weight) in graph.items():
        nx_graph.add_node(label, **{weight_attr: weight})

    for label, (edges, _weight) in graph.items():
        for neighbor, distance in edges:
            if nx_graph.has_edge(label, neighbor):
                attrs = nx_graph.edges[label, neighbor]
                attrs[distance_attr] = min(attrs[distance_attr], distance)
                continue
            nx_graph.add_edge(label, neighbor, **{distance_attr: distance})
    return nx_graph
