"""ComparisonResult dataclass for JEDI comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Rich result of a compare() call.

    Attributes:
        similarity_score: Normalised similarity in [0.0, 1.0].  1.0 is a
            zero-cost match.
        distance: Raw JEDI distance between the two canonical trees.
        left_size: Node count of the left tree.
        right_size: Node count of the right tree.
        max_distance: Normalization denominator used for the score.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    similarity_score: float
    distance: float
    left_size: int
    right_size: int
    max_distance: float
    computation_time_ms: float
