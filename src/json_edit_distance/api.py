"""Public API functions for json-edit-distance.

This module provides the user-facing functions: similarity, distance,
compare, and is_equivalent.  Each call creates a fresh JEDIComparator to
guarantee zero global state between calls, so concurrent calls on distinct
inputs need no coordination.
"""

from __future__ import annotations

from typing import Any

from json_edit_distance.algorithm.config import JEDIConfig
from json_edit_distance.comparator import JEDIComparator
from json_edit_distance.result import ComparisonResult

__all__ = ["compare", "distance", "is_equivalent", "similarity"]


def similarity(
    value_a: Any,
    value_b: Any,
    use_weighted_literal_distance: bool = False,
) -> float:
    """Return the JEDI similarity score for two JSON-like values.

    Args:
        value_a: First value (mapping, list, tuple, str, int, float, bool,
                 None or MISSING).
        value_b: Second value.
        use_weighted_literal_distance: When True, mismatching literals cost
                 their normalized Levenshtein distance instead of 1.0.

    Returns:
        A float in [0.0, 1.0].  1.0 denotes canonical equivalence.
    """
    config = JEDIConfig(weighted_literals=use_weighted_literal_distance)
    return compare(value_a, value_b, config=config).similarity_score


def distance(
    value_a: Any,
    value_b: Any,
    use_weighted_literal_distance: bool = False,
) -> float:
    """Return the raw JEDI distance for two JSON-like values.

    Deleting or inserting a subtree costs 2 per node, renaming a key 2.0,
    changing a literal 1.0 (or its weighted string distance), and each
    inverted pair of matched array elements 0.5.
    """
    config = JEDIConfig(weighted_literals=use_weighted_literal_distance)
    return compare(value_a, value_b, config=config).distance


def compare(
    left: Any,
    right: Any,
    config: JEDIConfig | None = None,
) -> ComparisonResult:
    """Compare two JSON-like values and return a rich ComparisonResult.

    Args:
        left:   First value.
        right:  Second value.
        config: Algorithm options.  Defaults to ``JEDIConfig()`` when None.

    Returns:
        A ``ComparisonResult`` with similarity_score, distance, tree sizes,
        max_distance and computation_time_ms populated.
    """
    comparator = JEDIComparator(config=config)
    return comparator.compare(left, right)


def is_equivalent(
    left: Any,
    right: Any,
    threshold: float = 0.9,
    config: JEDIConfig | None = None,
) -> bool:
    """Return True if the similarity of the two values reaches ``threshold``.

    Args:
        left:      First value.
        right:     Second value.
        threshold: Minimum similarity score in [0.0, 1.0].  Defaults to 0.9.
        config:    Algorithm options.  Defaults to ``JEDIConfig()`` when None.

    Raises:
        ValueError: If ``threshold`` is outside [0.0, 1.0].
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ValueError(msg)
    return compare(left, right, config=config).similarity_score >= threshold
