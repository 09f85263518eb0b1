"""Similarity normalizer for the JEDI algorithm.

Converts a raw tree edit distance into a similarity score in [0, 1]::

    similarity = 1 - min(1, distance / max_distance)

With the default SUM convention ``max_distance = 2 * (size_a + size_b)``:
the cost of deleting every node of both trees.  Long reversed arrays can
still exceed it through the inversion penalty, so both conventions rely on
the ``min(1, ...)`` clamp.  The MAX convention uses
``2 * max(size_a, size_b)``.
"""

from __future__ import annotations

from json_edit_distance.algorithm.config import NormalizationMode
from json_edit_distance.algorithm.costs import NODE_COST


def max_distance(
    size_a: int,
    size_b: int,
    mode: NormalizationMode = NormalizationMode.SUM,
) -> float:
    """Return the normalization denominator for two trees of the given sizes."""
    if mode == NormalizationMode.MAX:
        return NODE_COST * max(size_a, size_b)
    return NODE_COST * (size_a + size_b)


def normalize_similarity(
    distance: float,
    size_a: int,
    size_b: int,
    mode: NormalizationMode = NormalizationMode.SUM,
) -> float:
    """Normalize a raw JEDI distance to a [0, 1] similarity score.

    Args:
        distance: Raw distance between the two trees (>= 0).
        size_a:   Node count of the left tree.
        size_b:   Node count of the right tree.
        mode:     Denominator convention.

    Returns:
        Float in [0.0, 1.0]; 1.0 means a zero-cost match.
    """
    denominator = max_distance(size_a, size_b, mode)
    if denominator <= 0.0:
        return 1.0
    return 1.0 - min(1.0, distance / denominator)
