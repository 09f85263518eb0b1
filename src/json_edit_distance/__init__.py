"""JSON edit distance - JEDI similarity scoring for JSON-like values."""

from __future__ import annotations

from json_edit_distance.algorithm.config import (
    JEDIConfig,
    MatchingStrategy,
    NormalizationMode,
)
from json_edit_distance.api import compare, distance, is_equivalent, similarity
from json_edit_distance.comparator import JEDIComparator
from json_edit_distance.result import ComparisonResult
from json_edit_distance.tree.nodes import MISSING

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "ComparisonResult",
    "JEDIComparator",
    "JEDIConfig",
    "MatchingStrategy",
    "NormalizationMode",
    "compare",
    "distance",
    "is_equivalent",
    "similarity",
]
