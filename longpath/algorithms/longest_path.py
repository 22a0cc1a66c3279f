"""Longest simple path by branch-and-bound depth-first search.

Every vertex is tried as a start. From each start the search enumerates simple
paths in adjacency order and abandons a partial path as soon as its distance
plus the `BoundTable` upper bound cannot beat the best path recorded so far.

Notes:
    Candidates are recorded under strict ``>`` comparison, so among equally long
    paths the first one in enumeration order (start-vertex order, then
    adjacency order at each branch) is kept.

    Two engines are available. ``Traversal.ITERATIVE`` keeps an explicit stack
    of frames and is not limited by the interpreter's recursion depth.
    ``Traversal.RECURSIVE`` descends one Python frame per path vertex. Both
    visit states in the same order and return the same result and statistics.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Set, Tuple

from longpath.algorithms.bound import BoundTable
from longpath.graph.edge_graph import AdjacencyLists, EdgeGraph
from longpath.logging import get_logger
from longpath.types import ClosurePolicy, Distance, Traversal, Vertex, Weight

logger = get_logger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search.

    Attributes:
        expanded: Search states whose outgoing edges were explored.
        pruned: Search states abandoned by the bound check.
        improvements: Times the best path was replaced.
    """

    expanded: int = 0
    pruned: int = 0
    improvements: int = 0


@dataclass(frozen=True)
class LongestPath:
    """Best path found by the search.

    Attributes:
        distance: Total weight of ``path``; ``-inf`` when the graph is empty.
        path: Vertex sequence. Under ``ClosurePolicy.RETURN_TO_START`` a closed
            tour ends with its start vertex repeated.
        stats: Search counters; ignored in equality checks.
    """

    distance: Distance
    path: Tuple[Vertex, ...]
    stats: SearchStats = field(default_factory=SearchStats, compare=False, repr=False)

    @property
    def found(self) -> bool:
        return bool(self.path)

    def __len__(self) -> int:
        return len(self.path)


class SearchContext:
    """Shared state of one search run: the best result, the bound, and counters.

    The best result is written only through `try_improve`.
    """

    def __init__(
        self,
        adjacency: AdjacencyLists,
        bound: BoundTable,
        closure: ClosurePolicy = ClosurePolicy.DEAD_END,
        prune: bool = True,
    ) -> None:
        self.adjacency = adjacency
        self.bound = bound
        self.closure = closure
        self.prune = prune
        self.vertex_count = len(adjacency)
        self.best_distance: Distance = -math.inf
        self.best_path: Tuple[Vertex, ...] = ()
        self.stats = SearchStats()
        # A closing edge is one hop beyond the remaining vertices.
        self._extra_hops = 1 if closure == ClosurePolicy.RETURN_TO_START else 0

    def try_improve(self, distance: Distance, path: List[Vertex]) -> bool:
        """Record ``path`` as the best result if it is strictly longer.

        Returns:
            True if the best result was replaced.
        """
        if distance > self.best_distance:
            self.best_distance = distance
            self.best_path = tuple(path)
            self.stats.improvements += 1
            return True
        return False

    def should_prune(self, distance: Distance, visited_count: int) -> bool:
        """Check whether no extension of the current partial path can win."""
        if not self.prune:
            return False
        remaining = self.vertex_count - visited_count
        hops = min(remaining + self._extra_hops, self.bound.edge_count)
        if distance + self.bound.upper_bound(hops) <= self.best_distance:
            self.stats.pruned += 1
            return True
        return False

    def closes_tour(self, current: Vertex, nxt: Vertex, start: Vertex) -> bool:
        # A self-loop on the start vertex is not a tour.
        return (
            self.closure == ClosurePolicy.RETURN_TO_START
            and nxt == start
            and current != start
        )

    def result(self) -> LongestPath:
        return LongestPath(self.best_distance, self.best_path, self.stats)


@contextmanager
def _visiting(visited: Set[Vertex], path: List[Vertex], vertex: Vertex) -> Iterator[None]:
    """Push ``vertex`` onto the active path for the duration of the block."""
    visited.add(vertex)
    path.append(vertex)
    try:
        yield
    finally:
        path.pop()
        visited.remove(vertex)


def _search_recursive(ctx: SearchContext, start: Vertex) -> None:
    visited: Set[Vertex] = set()
    path: List[Vertex] = []

    def visit(current: Vertex, distance: Distance) -> None:
        if ctx.should_prune(distance, len(visited)):
            return
        ctx.stats.expanded += 1

        extended = False
        for nxt, weight in ctx.adjacency[current]:
            if ctx.closes_tour(current, nxt, start):
                ctx.try_improve(distance + weight, path + [start])
                continue
            if nxt in visited:
                continue
            extended = True
            with _visiting(visited, path, nxt):
                visit(nxt, distance + weight)

        if not extended:
            ctx.try_improve(distance, path)

    with _visiting(visited, path, start):
        visit(start, 0.0)


class _Frame:
    __slots__ = ("vertex", "edges", "distance", "extended")

    def __init__(
        self, vertex: Vertex, edges: Iterator[Tuple[Vertex, Weight]], distance: Distance
    ) -> None:
        self.vertex = vertex
        self.edges = edges
        self.distance = distance
        self.extended = False


def _search_iterative(ctx: SearchContext, start: Vertex) -> None:
    visited: Set[Vertex] = {start}
    path: List[Vertex] = [start]

    if ctx.should_prune(0.0, len(visited)):
        return
    ctx.stats.expanded += 1
    stack = [_Frame(start, iter(ctx.adjacency[start]), 0.0)]

    while stack:
        frame = stack[-1]
        for nxt, weight in frame.edges:
            if ctx.closes_tour(frame.vertex, nxt, start):
                ctx.try_improve(frame.distance + weight, path + [start])
                continue
            if nxt in visited:
                continue
            frame.extended = True
            distance = frame.distance + weight
            visited.add(nxt)
            path.append(nxt)
            if ctx.should_prune(distance, len(visited)):
                path.pop()
                visited.remove(nxt)
                continue
            ctx.stats.expanded += 1
            stack.append(_Frame(nxt, iter(ctx.adjacency[nxt]), distance))
            break
        else:
            # Frame exhausted: record a dead end, then backtrack.
            if not frame.extended:
                ctx.try_improve(frame.distance, path)
            stack.pop()
            if stack:
                path.pop()
                visited.remove(frame.vertex)


def longest_simple_path(
    graph: EdgeGraph,
    closure: ClosurePolicy = ClosurePolicy.DEAD_END,
    traversal: Traversal = Traversal.ITERATIVE,
    prune: bool = True,
) -> LongestPath:
    """Find a longest simple directed path in ``graph``.

    Args:
        graph: Graph to search. Not modified.
        closure: Which frontier states count as complete candidate paths.
        traversal: Depth-first engine.
        prune: Apply bound-based pruning. Disabling it enumerates every simple
            path and yields the same result.

    Returns:
        The best path. For an empty graph, ``found`` is False and the distance
        is ``-inf``. If the graph has vertices but nothing was recorded, the
        first vertex is returned with distance 0.
    """
    adjacency = graph.adjacency_lists()
    bound = BoundTable.from_weights(graph.weights())
    ctx = SearchContext(adjacency, bound, closure=closure, prune=prune)

    search = (
        _search_recursive if traversal == Traversal.RECURSIVE else _search_iterative
    )
    for start in adjacency:
        search(ctx, start)

    if not ctx.best_path and adjacency:
        ctx.best_distance = 0.0
        ctx.best_path = (next(iter(adjacency)),)

    stats = ctx.stats
    logger.debug(
        f"Search over {ctx.vertex_count} vertices and {bound.edge_count} edges:"
        f" expanded={stats.expanded} pruned={stats.pruned}"
        f" improvements={stats.improvements} best={ctx.best_distance}"
    )
    return ctx.result()
