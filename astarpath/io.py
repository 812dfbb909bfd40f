"""Reading and writing search graphs as YAML/JSON documents.

Two document shapes are accepted. Nodes keyed by label::

    nodes:
      S: {weight: 1.0, edges: [[O1, 22.0], [O2, 5.0]]}
      O1: {weight: 4.0, edges: [[E, 4.0]]}

or a list of nodes with explicit ids, which is needed for coordinate labels
because YAML cannot use a sequence as a mapping key::

    nodes:
      - {id: [0, 0], weight: 1.0, edges: [[[0, 1], 1.0], [[1, 0], 1.0]]}

Sequence labels are converted to tuples so they are hashable. An edge may also
be written as a mapping ``{to: <label>, distance: <number>}``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Hashable, List, Tuple, Union

import yaml

from astarpath.types.base import Cost, Graph

_INT_RE = re.compile(r"^[+-]?\d+$")


def _normalize_label(value: Any) -> Hashable:
    """Return a hashable label for a value loaded from YAML/JSON.

    Lists become tuples (recursively). YAML 1.1 boolean-looking keys such as
    ``yes``/``on`` load as Python booleans; they are turned back into the
    strings ``"True"``/``"False"`` so they do not collide with ``1``/``0``.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, list):
        return tuple(_normalize_label(item) for item in value)
    if isinstance(value, dict):
        raise ValueError(f"Node label must be a scalar or a sequence, got {value!r}")
    return value


def _parse_number(value: Any, what: str) -> Cost:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    return value


def _parse_edges(label: Hashable, raw_edges: Any) -> List[Tuple[Hashable, Cost]]:
    if raw_edges is None:
        return []
    if not isinstance(raw_edges, list):
        raise ValueError(f"'edges' of node {label!r} must be a list")
    edges: List[Tuple[Hashable, Cost]] = []
    for raw in raw_edges:
        if isinstance(raw, dict):
            if "to" not in raw:
                raise ValueError(f"Edge of node {label!r} is missing 'to': {raw!r}")
            neighbor = _normalize_label(raw["to"])
            distance = raw.get("distance", 1.0)
        elif isinstance(raw, list) and len(raw) == 2:
            neighbor = _normalize_label(raw[0])
            distance = raw[1]
        else:
            raise ValueError(
                f"Edge of node {label!r} must be [neighbor, distance] or a mapping, "
                f"got {raw!r}"
            )
        distance = _parse_number(distance, f"Distance of edge {label!r} -> {neighbor!r}")
        if distance < 0:
            raise ValueError(
                f"Edge {label!r} -> {neighbor!r} has negative distance {distance}"
            )
        edges.append((neighbor, distance))
    return edges


def _parse_node(label: Hashable, node_def: Any) -> Tuple[List[Tuple[Hashable, Cost]], Cost]:
    if node_def is None:
        node_def = {}
    if not isinstance(node_def, dict):
        raise ValueError(f"Definition of node {label!r} must be a mapping")
    allowed = {"id", "weight", "edges"}
    for key in node_def:
        if key not in allowed:
            raise ValueError(f"Unrecognized key '{key}' in node {label!r}")
    weight = _parse_number(node_def.get("weight", 0.0), f"Weight of node {label!r}")
    return _parse_edges(label, node_def.get("edges")), weight


def graph_from_dict(
    data: Dict[str, Any],
) -> Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]]:
    """Build a search graph from a parsed document.

    Args:
        data: Mapping with a ``nodes`` section, either a mapping of
            label -> node definition or a list of node definitions with ``id``.

    Returns:
        Mapping of label -> (list of (neighbor, distance), weight), with nodes
        and edges in document order.

    Raises:
        ValueError: If the document is malformed or declares a node twice.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph document must map to a dictionary at top-level.")
    extra = set(data.keys()) - {"nodes"}
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in graph document: {', '.join(sorted(extra))}"
        )
    nodes = data.get("nodes")
    if nodes is None:
        raise ValueError("Graph document must contain a 'nodes' section")

    graph: Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]] = {}
    if isinstance(nodes, dict):
        for raw_label, node_def in nodes.items():
            label = _normalize_label(raw_label)
            if label in graph:
                raise ValueError(f"Node {label!r} is declared more than once")
            graph[label] = _parse_node(label, node_def)
    elif isinstance(nodes, list):
        for node_def in nodes:
            if not isinstance(node_def, dict) or "id" not in node_def:
                raise ValueError(f"Each node in a 'nodes' list needs an 'id': {node_def!r}")
            label = _normalize_label(node_def["id"])
            if label in graph:
                raise ValueError(f"Node {label!r} is declared more than once")
            graph[label] = _parse_node(label, node_def)
    else:
        raise ValueError("'nodes' must be a mapping or a list")
    return graph


def _dump_label(label: Any) -> Any:
    if isinstance(label, tuple):
        return [_dump_label(item) for item in label]
    return label


def graph_to_dict(graph: Graph[Any]) -> Dict[str, Any]:
    """Return a document for ``graph`` in the list-of-nodes shape.

    The list shape round-trips every label ``graph_from_dict`` produces,
    including tuples, and is safe for both ``json.dumps`` and ``yaml.safe_dump``.
    """
    return {
        "nodes": [
            {
                "id": _dump_label(label),
                "weight": weight,
                "edges": [[_dump_label(nbr), distance] for nbr, distance in edges],
            }
            for label, (edges, weight) in graph.items()
        ]
    }


def load_graph_yaml(
    yaml_str: str,
) -> Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]]:
    """Parse a YAML (or JSON) string into a search graph.

    Raises:
        ValueError: If the document is empty or malformed.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise ValueError("Graph document is empty")
    return graph_from_dict(data)


def load_graph_file(
    path: Union[str, Path],
) -> Dict[Hashable, Tuple[List[Tuple[Hashable, Cost]], Cost]]:
    """Read and parse a YAML or JSON graph file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is empty or malformed.
    """
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))


def parse_label(text: str) -> Hashable:
    """Parse a label typed on the command line.

    ``"7"`` becomes ``7``, ``"0,1"`` becomes ``(0, 1)`` (each part parsed the
    same way) and anything else stays a string.
    """
    text = text.strip()
    if "," in text:
        return tuple(parse_label(part) for part in text.split(","))
    if _INT_RE.match(text):
        return int(text)
    return text
