"""longpath: longest simple path search in weighted directed graphs.

Reads a flat edge list, builds a multi-directed graph, and finds a longest
simple path with branch-and-bound depth-first search.

Primary API:
    solve() - Edge lines in, CRLF-separated vertex ids out
    solve_lines() - Edge lines in, LongestPath result out
    longest_simple_path() - Search on a built EdgeGraph
    SearchConfig - Closure policy, parse mode, traversal and pruning options

Example:
    from longpath import solve

    print(solve(["1, 2, 5", "2, 3, 1"]))
"""

from __future__ import annotations

from longpath import cli, logging
from longpath._version import __version__
from longpath.algorithms.bound import BoundTable
from longpath.algorithms.longest_path import (
    LongestPath,
    SearchContext,
    SearchStats,
    longest_simple_path,
)
from longpath.config import DEFAULT_CONFIG, SearchConfig
from longpath.graph.edge_graph import EdgeGraph
from longpath.graph.io import (
    EdgeParseError,
    edgelist_to_graph,
    format_path,
    parse_edge_line,
    parse_edge_lines,
)
from longpath.solver import find_longest_path, solve, solve_lines
from longpath.types import ClosurePolicy, ParseMode, Traversal

__all__ = [
    # Version
    "__version__",
    # Graph
    "EdgeGraph",
    "EdgeParseError",
    "edgelist_to_graph",
    "parse_edge_line",
    "parse_edge_lines",
    "format_path",
    # Search
    "BoundTable",
    "LongestPath",
    "SearchContext",
    "SearchStats",
    "longest_simple_path",
    "find_longest_path",
    "solve",
    "solve_lines",
    # Config and types
    "SearchConfig",
    "DEFAULT_CONFIG",
    "ClosurePolicy",
    "ParseMode",
    "Traversal",
    # Utilities
    "cli",
    "logging",
]
