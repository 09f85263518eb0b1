"""Child matchers: two-phase greedy binding and optimal bipartite assignment.

Both matchers take an ``(m, n)`` cost matrix whose cell ``[i, j]`` is the
recursive distance between source child ``i`` and destination child ``j``,
and return a partial one-to-one correspondence as a list of ``(i, j)`` pairs.

The greedy matcher is a heuristic and its tie-break order is part of its
behaviour: seed pairs are bound first, in the order given; the remaining
pairs are visited in ascending cost with ties broken by row-major position.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

Pair = tuple[int, int]


def label_seed_pairs(
    labels_a: Sequence[str | None],
    labels_b: Sequence[str | None],
) -> list[Pair]:
    """Pair each destination with the first unused source carrying its label.

    Destinations are visited in order; within a destination, sources are
    scanned in order and the first free one with an equal label is bound.
    """
    pairs: list[Pair] = []
    used_a: set[int] = set()
    for j, label_b in enumerate(labels_b):
        for i, label_a in enumerate(labels_a):
            if i not in used_a and label_a == label_b:
                used_a.add(i)
                pairs.append((i, j))
                break
    return pairs


def zero_cost_seed_pairs(cost_matrix: np.ndarray) -> list[Pair]:
    """Pair each source with the first unused destination at exactly zero cost.

    Sources are visited in row order, destinations in column order.
    """
    pairs: list[Pair] = []
    used_b: set[int] = set()
    m, n = cost_matrix.shape
    for i in range(m):
        for j in range(n):
            if j not in used_b and cost_matrix[i, j] == 0.0:
                used_b.add(j)
                pairs.append((i, j))
                break
    return pairs


def greedy_match(cost_matrix: np.ndarray, seeds: Iterable[Pair] = ()) -> list[Pair]:
    """Two-phase greedy correspondence over a cost matrix.

    Args:
        cost_matrix: 2-D cost matrix of shape ``(m, n)``.
        seeds: Pairs to bind before the cost-ordered pass.  A seed whose
            source or destination is already bound is skipped.

    Returns:
        The bound ``(i, j)`` pairs in binding order.  Every source and every
        destination appears at most once.
    """
    used_a: set[int] = set()
    used_b: set[int] = set()
    pairs: list[Pair] = []

    def _bind(i: int, j: int) -> None:
        if i in used_a or j in used_b:
            return
        used_a.add(i)
        used_b.add(j)
        pairs.append((i, j))

    for i, j in seeds:
        _bind(i, j)

    m, n = cost_matrix.shape
    if m == 0 or n == 0:
        return pairs

    # Stable argsort over the row-major ravel keeps row-major order among ties
    order = np.argsort(cost_matrix.ravel(), kind="stable")
    for flat in order.tolist():
        if len(used_a) == m or len(used_b) == n:
            break
        i, j = divmod(flat, n)
        _bind(i, j)

    return pairs


def hungarian_match(cost_matrix: np.ndarray) -> list[Pair]:
    """Minimum-cost assignment of ``min(m, n)`` pairs via scipy.

    Args:
        cost_matrix: 2-D finite cost matrix of shape ``(m, n)``.

    Returns:
        The assigned ``(i, j)`` pairs in ascending source order.  Empty when
        either dimension is zero.
    """
    if cost_matrix.size == 0:
        return []

    row_ind, col_ind = linear_sum_assignment(np.asarray(cost_matrix, dtype=float))
    return list(zip(row_ind.tolist(), col_ind.tolist(), strict=True))


def count_inversions(pairs: Iterable[Pair]) -> int:
    """Count pairs of matches whose destination order contradicts source order.

    Two matches ``(i1, j1)`` and ``(i2, j2)`` with ``i1 < i2`` form an
    inversion when ``j1 > j2``.
    """
    columns = [j for _, j in sorted(pairs)]
    inversions = 0
    for k, j1 in enumerate(columns):
        for j2 in columns[k + 1 :]:
            if j1 > j2:
                inversions += 1
    return inversions
