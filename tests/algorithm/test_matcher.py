"""Test suite for the child matchers.

Tests seed-pair selection, the two-phase greedy binding and its tie-break
order, the optimal (Hungarian) assignment, and inversion counting.
"""

from __future__ import annotations

import numpy as np
import pytest

from json_edit_distance.algorithm.matcher import (
    count_inversions,
    greedy_match,
    hungarian_match,
    label_seed_pairs,
    zero_cost_seed_pairs,
)


class TestLabelSeedPairs:
    def test_matches_equal_labels(self) -> None:
        pairs = label_seed_pairs(["cast", "running time", "title"], ["cast", "name", "running time"])
        assert pairs == [(0, 0), (1, 2)]

    def test_no_common_labels(self) -> None:
        assert label_seed_pairs(["a"], ["b"]) == []

    def test_duplicate_labels_bind_once_each(self) -> None:
        assert label_seed_pairs(["x", "x"], ["x", "x", "x"]) == [(0, 0), (1, 1)]

    def test_empty_sides(self) -> None:
        assert label_seed_pairs([], ["a"]) == []
        assert label_seed_pairs(["a"], []) == []


class TestZeroCostSeedPairs:
    def test_first_zero_per_row(self) -> None:
        cost = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        assert zero_cost_seed_pairs(cost) == [(0, 1), (1, 0)]

    def test_used_columns_skipped(self) -> None:
        cost = np.array([[0.0, 1.0], [0.0, 1.0]])
        assert zero_cost_seed_pairs(cost) == [(0, 0)]

    def test_no_zeros(self) -> None:
        assert zero_cost_seed_pairs(np.ones((2, 2))) == []


class TestGreedyMatch:
    def test_empty_matrix(self) -> None:
        assert greedy_match(np.empty((0, 3))) == []
        assert greedy_match(np.empty((3, 0))) == []

    def test_cheapest_pairs_first(self) -> None:
        cost = np.array([[4.0, 1.0], [2.0, 3.0]])
        assert greedy_match(cost) == [(0, 1), (1, 0)]

    def test_greedy_is_not_optimal(self) -> None:
        # Greedy binds (0, 0) at 1.0 and is then forced into (1, 1) at 10.0
        cost = np.array([[1.0, 2.0], [2.0, 10.0]])
        assert greedy_match(cost) == [(0, 0), (1, 1)]

    def test_ties_broken_row_major(self) -> None:
        cost = np.array([[1.0, 1.0], [1.0, 1.0]])
        assert greedy_match(cost) == [(0, 0), (1, 1)]

    def test_seeds_bound_before_cheaper_pairs(self) -> None:
        cost = np.array([[5.0, 0.5], [0.1, 5.0]])
        pairs = greedy_match(cost, seeds=[(0, 0)])
        assert pairs == [(0, 0), (1, 1)]

    def test_conflicting_seed_skipped(self) -> None:
        cost = np.zeros((2, 2))
        assert greedy_match(cost, seeds=[(0, 0), (0, 1)]) == [(0, 0), (1, 1)]

    def test_rectangular_leaves_extra_unmatched(self) -> None:
        cost = np.array([[3.0], [1.0], [2.0]])
        assert greedy_match(cost) == [(1, 0)]

    def test_one_to_one(self) -> None:
        rng = np.random.default_rng(7)
        cost = rng.random((5, 4))
        pairs = greedy_match(cost)
        assert len(pairs) == 4
        assert len({i for i, _ in pairs}) == 4
        assert len({j for _, j in pairs}) == 4


class TestHungarianMatch:
    def test_empty_matrix(self) -> None:
        assert hungarian_match(np.empty((0, 0))) == []
        assert hungarian_match(np.empty((2, 0))) == []

    def test_finds_optimal_assignment(self) -> None:
        cost = np.array([[1.0, 2.0], [2.0, 10.0]])
        pairs = hungarian_match(cost)
        assert pairs == [(0, 1), (1, 0)]
        assert sum(cost[i, j] for i, j in pairs) == pytest.approx(4.0)

    def test_rectangular(self) -> None:
        cost = np.array([[3.0], [1.0], [2.0]])
        assert hungarian_match(cost) == [(1, 0)]

    def test_never_worse_than_greedy(self) -> None:
        rng = np.random.default_rng(11)
        for _ in range(20):
            cost = rng.random((4, 5))
            optimal = sum(cost[i, j] for i, j in hungarian_match(cost))
            greedy = sum(cost[i, j] for i, j in greedy_match(cost))
            assert optimal <= greedy + 1e-12


class TestCountInversions:
    def test_identity_has_none(self) -> None:
        assert count_inversions([(0, 0), (1, 1), (2, 2)]) == 0

    def test_single_swap(self) -> None:
        assert count_inversions([(0, 0), (1, 2), (2, 1)]) == 1

    def test_full_reversal(self) -> None:
        assert count_inversions([(0, 3), (1, 2), (2, 1), (3, 0)]) == 6

    def test_pair_order_irrelevant(self) -> None:
        assert count_inversions([(2, 1), (0, 0), (1, 2)]) == 1

    def test_gaps_allowed(self) -> None:
        assert count_inversions([(0, 5), (4, 1)]) == 1

    def test_empty(self) -> None:
        assert count_inversions([]) == 0
