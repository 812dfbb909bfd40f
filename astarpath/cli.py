"""Command-line interface for astarpath."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Hashable, List, Optional

from astarpath.algorithms.search import search
from astarpath.config import SearchConfig
from astarpath.graph.model import missing_labels
from astarpath.io import load_graph_file, parse_label
from astarpath.logging import get_logger, level_for_flags, set_global_log_level
from astarpath.types.base import Graph, PathSearchError

logger = get_logger(__name__)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Trims trailing zeros and the decimal point when not needed. Falls back to
    ``str(value)`` if the input cannot be parsed as a float.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _format_path(path: List[Hashable]) -> str:
    return " -> ".join(str(label) for label in path)


def _resolve_label(text: str, graph: Graph[Any]) -> Hashable:
    """Return the graph key typed as ``text``.

    A node whose key is the literal text wins (string keys such as ``"0"`` from
    JSON documents); otherwise the text is parsed with ``parse_label``.
    """
    if text in graph:
        return text
    return parse_label(text)


def _find_path(
    path: Path,
    start_text: str,
    end_text: str,
    as_json: bool,
    max_expansions: Optional[int],
) -> None:
    """Load a graph document and print the best path between two labels.

    Args:
        path: YAML or JSON graph document.
        start_text: Start label as typed on the command line.
        end_text: End label as typed on the command line.
        as_json: Print a JSON object instead of a text summary.
        max_expansions: Optional cap on frontier expansions.
    """
    logger.info(f"Loading graph from: {path}")
    start_time = perf_counter()
    try:
        graph = load_graph_file(path)
        start = _resolve_label(start_text, graph)
        end = _resolve_label(end_text, graph)
        config = SearchConfig(max_expansions=max_expansions)
        result = search(start, graph, end, config=config)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except (PathSearchError, ValueError) as e:
        logger.error(f"Search failed: {type(e).__name__}: {e}")
        print(f"ERROR: Search failed: {type(e).__name__}: {e}")
        sys.exit(1)

    elapsed = perf_counter() - start_time
    logger.info(
        f"Search finished in {_format_duration(elapsed)} "
        f"after {result.expansions} expansions"
    )

    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    if result.path is None:
        print(f"No path found from {start!r} to {end!r}")
        return

    print(f"Path: {_format_path(result.path)}")
    print(f"   Nodes: {len(result.path)}")
    print(f"   Distance: {_format_cost(result.distance)}")
    print(f"   Score: {_format_cost(result.score)}")
    print(f"   Expansions: {result.expansions}")


def _validate_graph(path: Path) -> None:
    """Load a graph document and report dangling edge references."""
    logger.info(f"Validating graph: {path}")
    try:
        graph = load_graph_file(path)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid graph document: {e}")
        print(f"ERROR: Invalid graph document: {e}")
        sys.exit(1)

    edge_count = sum(len(edges) for edges, _weight in graph.values())
    print(f"   Nodes: {len(graph):,}")
    print(f"   Edges: {edge_count:,}")

    missing = missing_labels(graph)
    if missing:
        listed = ", ".join(sorted(repr(label) for label in missing))
        logger.error(f"Graph references {len(missing)} undefined node(s)")
        print(f"ERROR: Edges reference undefined nodes: {listed}")
        sys.exit(1)
    print("OK: every edge target is defined")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``astarpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="astarpath",
        description="Find best paths in weighted graph documents.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,validate}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Find the best path between two nodes"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML or JSON")
    path_parser.add_argument(
        "--start", "-s", required=True, help="Start label (e.g. S, 3 or 0,1)"
    )
    path_parser.add_argument(
        "--end", "-e", required=True, help="End label (e.g. E, 15 or 3,3)"
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    path_parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Abort after expanding this many frontier entries",
    )

    validate_parser = subparsers.add_parser(
        "validate", help="Check that every edge target is defined"
    )
    validate_parser.add_argument(
        "graph", type=Path, help="Path to graph YAML or JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "path":
        _find_path(
            path=args.graph,
            start_text=args.start,
            end_text=args.end,
            as_json=args.json,
            max_expansions=args.max_expansions,
        )
    elif args.command == "validate":
        _validate_graph(args.graph)


if __name__ == "__main__":
    main()
