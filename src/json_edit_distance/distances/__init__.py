"""String distance implementations for weighted literal comparison.

All distances satisfy the ``StringDistance`` Protocol structurally.
"""

from json_edit_distance.distances.levenshtein import (
    LevenshteinDistance,
    levenshtein_distance,
)

__all__ = ["LevenshteinDistance", "levenshtein_distance"]
