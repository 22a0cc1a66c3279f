"""Shared sample graphs for the test suite."""

from __future__ import annotations

import pytest

from longpath.graph.edge_graph import EdgeGraph


@pytest.fixture
def sample_lines():
    # 1→2 [8.54], 2→3 [3.11], 3→1 [2.19], 3→4 [4], 4→1 [1.4]
    return ["1, 2, 8.54", "2, 3, 3.11", "3, 1, 2.19", "3, 4, 4", "4, 1, 1.4"]


@pytest.fixture
def sample_graph(sample_lines):
    g = EdgeGraph()
    for line in sample_lines:
        src, dst, weight = (part.strip() for part in line.split(","))
        g.add_edge(int(src), int(dst), weight=float(weight))
    return g


@pytest.fixture
def fork():
    # Two equally long branches; 1→2 comes first in the input.
    #   ┌──[1]──► 2
    #   1
    #   └──[1]──► 3
    return EdgeGraph.from_records([(1, 2, 1.0), (1, 3, 1.0)])


@pytest.fixture
def parallel_edges():
    # 1 ══[1, 7]══► 2 ──[2]──► 3
    return EdgeGraph.from_records([(1, 2, 1.0), (1, 2, 7.0), (2, 3, 2.0)])


@pytest.fixture
def negative_tail():
    # 1 ──[5]──► 2 ──[-10]──► 3
    return EdgeGraph.from_records([(1, 2, 5.0), (2, 3, -10.0)])


@pytest.fixture
def complete_4():
    """Fully connected directed graph with 4 vertices and distinct weights."""
    g = EdgeGraph()
    weight = 1.0
    for u in range(1, 5):
        for v in range(1, 5):
            if u != v:
                g.add_edge(u, v, weight=weight)
                weight += 1.0
    return g
