"""Weighted multi-directed graph built from a flat edge list.

`EdgeGraph` extends `networkx.MultiDiGraph` so that every edge record stays a
distinct traversal option, even when several records share the same ordered
pair. Edges get monotonically increasing integer keys, which makes the input
order of edges recoverable across parallel edges; the search relies on that
order for deterministic tie-breaking.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from longpath.types import EdgeRecord, Vertex, Weight

EdgeID = int
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[Vertex, Vertex, EdgeID, AttrDict]
AdjacencyLists = Dict[Vertex, List[Tuple[Vertex, Weight]]]

#: Weight assumed for edges added without a ``weight`` attribute.
DEFAULT_WEIGHT = 1


class EdgeGraph(nx.MultiDiGraph):
    """A multi-directed graph with implicit vertices and ordered edge keys.

    Differences from ``networkx.MultiDiGraph``:
      - Each edge key is an integer taken from a counter that only advances,
        so key order equals insertion order.
      - Edges are indexed by key in ``get_edges()``.
      - Read-only views used by the search (`vertices`, `adjacency_lists`,
        `weights`) preserve insertion order.

    Vertices are created implicitly by ``add_edge``, source before
    destination, which fixes the first-seen vertex order.
    """

    def __init__(self, **attr: Any) -> None:
        super().__init__(**attr)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    @classmethod
    def from_records(cls, records: Iterable[EdgeRecord]) -> EdgeGraph:
        """Build a graph from ``(source, destination, weight)`` triples.

        Duplicate records and self-loops are kept as ordinary edges.
        """
        graph = cls()
        for src, dst, weight in records:
            graph.add_edge(src, dst, weight=weight)
        return graph

    def new_edge_key(self, u: Vertex, v: Vertex, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge ID.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, u_for_edge: Vertex, v_for_edge: Vertex, **attr: Any
    ) -> EdgeID:
        """Add a directed edge, creating missing endpoint vertices.

        Keys always come from ``new_edge_key``; callers cannot choose them.

        Args:
            u_for_edge: Source vertex.
            v_for_edge: Destination vertex.
            **attr: Edge attributes, normally ``weight``.

        Returns:
            The key of the new edge.
        """
        key = self.new_edge_key(u_for_edge, v_for_edge)
        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],
        )
        return key

    #
    # Read-only views
    #
    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return all edges keyed by edge ID, in insertion order."""
        return self._edges

    def vertices(self) -> List[Vertex]:
        """Return every vertex exactly once, in first-seen order."""
        return list(self.nodes)

    def weights(self) -> List[Weight]:
        """Return the weight of every edge, in insertion order.

        Parallel edges and self-loops are all included.
        """
        return [
            attr.get("weight", DEFAULT_WEIGHT)
            for _, _, _, attr in self._edges.values()
        ]

    def adjacency_lists(self) -> AdjacencyLists:
        """Return ``{vertex: [(destination, weight), ...]}`` for every vertex.

        Lists follow edge insertion order, not NetworkX's per-neighbor grouping.
        Vertices without outgoing edges map to an empty list.
        """
        adjacency: AdjacencyLists = {vertex: [] for vertex in self.nodes}
        for src, dst, _, attr in self._edges.values():
            adjacency[src].append((dst, attr.get("weight", DEFAULT_WEIGHT)))
        return adjacency

    def path_weight(self, path: Sequence[Vertex]) -> float:
        """Recompute the total weight of a vertex sequence.

        For each hop the heaviest parallel edge is used, which is the edge a
        longest-path search settles on.

        Raises:
            ValueError: If a consecutive pair is not connected by an edge.
        """
        total = 0.0
        for u, v in zip(path, path[1:]):
            if u not in self.succ or v not in self.succ[u]:
                raise ValueError(f"No edge from '{u}' to '{v}'.")
            total += max(
                attr.get("weight", DEFAULT_WEIGHT) for attr in self.succ[u][v].values()
            )
        return total
