"""JEDIConfig, NormalizationMode and MatchingStrategy.

JEDIConfig is a frozen (immutable) dataclass holding the algorithm options.
It is passed explicitly through every recursive distance call, so one
JEDIAlgorithm never depends on ambient state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class NormalizationMode(StrEnum):
    """Denominator convention used to turn a raw distance into a similarity.

    - SUM: ``2 * (size_a + size_b)``, the cost of deleting both trees entirely.
    - MAX: ``2 * max(size_a, size_b)``; scores are clamped at 0.0.
    """

    SUM = auto()
    MAX = auto()


class MatchingStrategy(StrEnum):
    """How children of OBJECT and ARRAY nodes are put into correspondence.

    - GREEDY:  Two-phase heuristic (exact matches first, then cheapest pairs).
    - OPTIMAL: Minimum-cost assignment via the Hungarian algorithm.  Produces
               numerically different scores from GREEDY on some inputs.
    """

    GREEDY = auto()
    OPTIMAL = auto()


@dataclass(frozen=True, slots=True)
class JEDIConfig:
    """Immutable configuration for the JEDI algorithm.

    Attributes:
        weighted_literals: When True, a literal mismatch costs the normalized
            Levenshtein distance between the two labels instead of a flat 1.0.
        normalization: Similarity denominator convention.
        matching: Child matching strategy for OBJECT and ARRAY nodes.
    """

    weighted_literals: bool = False
    normalization: NormalizationMode = NormalizationMode.SUM
    matching: MatchingStrategy = MatchingStrategy.GREEDY

    def __post_init__(self) -> None:
        if not isinstance(self.weighted_literals, bool):
            msg = (
                "weighted_literals must be a bool, "
                f"got {type(self.weighted_literals).__name__}"
            )
            raise TypeError(msg)
        try:
            object.__setattr__(
                self, "normalization", NormalizationMode(self.normalization)
            )
            object.__setattr__(self, "matching", MatchingStrategy(self.matching))
        except ValueError as exc:
            msg = f"invalid JEDIConfig option: {exc}"
            raise ValueError(msg) from exc
