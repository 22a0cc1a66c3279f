import pytest

from longpath.algorithms.bound import BoundTable


class TestBoundTable:
    def test_sorted_and_prefix_sums(self):
        table = BoundTable.from_weights([3, 1, 2])
        assert table.sorted_weights == (3, 2, 1)
        assert table.prefix_sums == (0, 3, 5, 6)
        assert table.bounds == (0, 3, 5, 6)
        assert table.edge_count == 3

    def test_upper_bound_clamps_hops(self):
        table = BoundTable.from_weights([3, 1, 2])
        assert table.upper_bound(0) == 0
        assert table.upper_bound(-4) == 0
        assert table.upper_bound(1) == 3
        assert table.upper_bound(2) == 5
        assert table.upper_bound(3) == 6
        assert table.upper_bound(100) == 6

    def test_empty_table(self):
        table = BoundTable.from_weights([])
        assert table.edge_count == 0
        assert table.prefix_sums == (0,)
        assert table.upper_bound(5) == 0

    def test_duplicate_weights_are_kept(self):
        table = BoundTable.from_weights([2, 2, 2])
        assert table.upper_bound(3) == 6

    def test_negative_weights_never_lower_the_bound(self):
        table = BoundTable.from_weights([5, -10, 1])
        assert table.prefix_sums == (0, 5, 6, -4)
        assert table.bounds == (0, 5, 6, 6)
        assert table.upper_bound(3) == 6

    def test_all_negative_weights(self):
        table = BoundTable.from_weights([-1.5, -2.5])
        assert table.upper_bound(1) == 0
        assert table.upper_bound(2) == 0

    def test_bound_dominates_any_choice_of_edges(self):
        weights = [4.5, 0.25, 7.0, 3.0, 3.0]
        table = BoundTable.from_weights(weights)
        for hops in range(len(weights) + 1):
            for start in range(len(weights) - hops + 1):
                chosen = weights[start : start + hops]
                assert sum(chosen) <= table.upper_bound(hops) + 1e-12

    def test_table_is_immutable(self):
        table = BoundTable.from_weights([1])
        with pytest.raises(AttributeError):
            table.bounds = (0,)  # type: ignore[misc]
