"""End-to-end pipeline: edge lines in, longest path text out.

Example:
    >>> from longpath.solver import solve
    >>> solve(["1, 2, 8.54", "2, 3, 3.11", "3, 1, 2.19", "3, 4, 4", "4, 1, 1.4"])
    '1\\r\\n2\\r\\n3\\r\\n4'
"""

from __future__ import annotations

from typing import Iterable, Optional

from longpath.algorithms.longest_path import LongestPath, longest_simple_path
from longpath.config import DEFAULT_CONFIG, SearchConfig
from longpath.graph.edge_graph import EdgeGraph
from longpath.graph.io import edgelist_to_graph, format_path
from longpath.logging import get_logger

logger = get_logger(__name__)


def find_longest_path(
    graph: EdgeGraph, config: Optional[SearchConfig] = None
) -> LongestPath:
    """Run the search on a built graph using ``config`` (default config if None)."""
    config = config or DEFAULT_CONFIG
    return longest_simple_path(
        graph,
        closure=config.closure,
        traversal=config.traversal,
        prune=config.prune,
    )


def solve_lines(
    lines: Iterable[str], config: Optional[SearchConfig] = None
) -> LongestPath:
    """Parse edge lines and return the longest path result.

    Raises:
        EdgeParseError: If ``config.parse_mode`` is STRICT and a line is malformed.
    """
    config = config or DEFAULT_CONFIG
    graph = edgelist_to_graph(lines, mode=config.parse_mode)
    result = find_longest_path(graph, config)
    if result.found:
        logger.info(
            f"Longest path has {len(result)} vertices, distance {result.distance:g}"
        )
    else:
        logger.info("Empty graph, no path")
    return result


def solve(lines: Iterable[str], config: Optional[SearchConfig] = None) -> str:
    """Return the longest path as CRLF-separated vertex ids.

    An empty graph gives an empty string.
    """
    return format_path(solve_lines(lines, config).path)
