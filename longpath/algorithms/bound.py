"""Optimistic upper bound on the distance a partial path can still gain.

The bound assumes the ``k`` heaviest edges of the whole graph could be
traversed next, ignoring whether they actually chain from the current vertex.
That never underestimates the best extension of at most ``k`` edges, which is
what makes bound-based pruning sound.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Tuple

from longpath.types import Weight


@dataclass(frozen=True)
class BoundTable:
    """Prefix sums over edge weights sorted in descending order.

    Attributes:
        sorted_weights: All edge weights, heaviest first.
        prefix_sums: ``prefix_sums[i]`` is the sum of the ``i`` heaviest weights;
            ``prefix_sums[0] == 0``.
        bounds: ``bounds[i]`` is the largest of ``prefix_sums[0..i]``. Equal to
            ``prefix_sums`` when no weight is negative; with negative weights
            it still bounds every extension of at most ``i`` edges.
    """

    sorted_weights: Tuple[Weight, ...]
    prefix_sums: Tuple[float, ...]
    bounds: Tuple[float, ...]

    @classmethod
    def from_weights(cls, weights: Iterable[Weight]) -> BoundTable:
        """Build the table from the multiset of edge weights."""
        sorted_weights = tuple(sorted(weights, reverse=True))
        prefix_sums = tuple(accumulate(sorted_weights, initial=0.0))
        bounds = tuple(accumulate(prefix_sums, max))
        return cls(sorted_weights, prefix_sums, bounds)

    @property
    def edge_count(self) -> int:
        return len(self.sorted_weights)

    def upper_bound(self, available_hops: int) -> float:
        """Return the most distance any ``available_hops`` further edges can add.

        Args:
            available_hops: Number of edges the path may still traverse.

        Returns:
            0 when ``available_hops <= 0``, otherwise the bound at
            ``min(available_hops, edge_count)``.
        """
        if available_hops <= 0:
            return 0.0
        return self.bounds[min(available_hops, self.edge_count)]
