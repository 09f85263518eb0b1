"""JEDIComparator: orchestrator that wires TreeBuilder + JEDIAlgorithm + DistanceCache.

This is the wiring layer between the raw algorithm and the public API.  It
builds both canonical trees once, asks the algorithm for the raw distance,
normalizes it, and returns a ComparisonResult with sizes and timing data.

Weighted literal distances are memoized via DistanceCache (LRU) for the
lifetime of the comparator.  The cache is a performance detail: it never
changes a computed score.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from json_edit_distance.algorithm.config import JEDIConfig
from json_edit_distance.algorithm.jedi import JEDIAlgorithm
from json_edit_distance.algorithm.normalizer import max_distance, normalize_similarity
from json_edit_distance.cache import DistanceCache
from json_edit_distance.distances import LevenshteinDistance
from json_edit_distance.result import ComparisonResult
from json_edit_distance.tree.builder import TreeBuilder

if TYPE_CHECKING:
    from json_edit_distance.protocols import StringDistance

__all__ = ["JEDIComparator"]

logger = logging.getLogger(__name__)


class JEDIComparator:
    """Orchestrator for JEDI JSON comparison.

    Wires ``TreeBuilder``, ``JEDIAlgorithm`` and a ``StringDistance`` together
    into a single ``compare()`` call that returns a ``ComparisonResult``.

    Two separate ``JEDIComparator`` instances never share cache state.

    Example::

        from json_edit_distance.comparator import JEDIComparator

        cmp = JEDIComparator()
        result = cmp.compare({"a": 1, "b": 2}, {"b": 2, "a": 1})
        print(result.similarity_score)   # 1.0
        print(result.distance)           # 0.0
    """

    def __init__(
        self,
        config: JEDIConfig | None = None,
        string_distance: StringDistance | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Algorithm options.  Defaults to ``JEDIConfig()``.
            string_distance: Literal distance for weighted mode.  Defaults to
                ``LevenshteinDistance()``.
            max_cache_size: Maximum number of label pairs held in the
                per-instance LRU cache.  This is an infrastructure parameter,
                NOT part of ``JEDIConfig``.
        """
        self._config: JEDIConfig = config if config is not None else JEDIConfig()
        raw_distance: Any = (
            string_distance if string_distance is not None else LevenshteinDistance()
        )
        self._string_distance = DistanceCache(raw_distance, max_size=max_cache_size)
        self._algorithm = JEDIAlgorithm(
            config=self._config, string_distance=self._string_distance
        )
        self._builder = TreeBuilder()

    @property
    def config(self) -> JEDIConfig:
        return self._config

    def compare(self, left: Any, right: Any) -> ComparisonResult:
        """Compare two JSON-like values and return a ComparisonResult.

        Calling this method twice with the same inputs and config always
        produces identical result values (timing aside).

        Args:
            left:  First value (mapping, list, tuple, str, int, float, bool,
                   None or MISSING).
            right: Second value.

        Returns:
            A ``ComparisonResult`` with all fields populated.

        Raises:
            TypeError:  If either value contains an unsupported type.
            ValueError: If either value contains a circular reference, nests
                        deeper than ``MAX_DEPTH``, has two mapping keys with
                        the same canonical label, or holds an int too large
                        to label.
        """
        t0 = time.perf_counter()

        left_tree = self._builder.build(left)
        right_tree = self._builder.build(right)

        distance = self._algorithm.distance(left_tree, right_tree)
        mode = self._config.normalization
        score = normalize_similarity(distance, left_tree.size, right_tree.size, mode)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "JEDI compare: sizes=(%d, %d) distance=%.4f similarity=%.4f in %.3f ms",
            left_tree.size,
            right_tree.size,
            distance,
            score,
            elapsed_ms,
        )

        return ComparisonResult(
            similarity_score=score,
            distance=distance,
            left_size=left_tree.size,
            right_size=right_tree.size,
            max_distance=max_distance(left_tree.size, right_tree.size, mode),
            computation_time_ms=elapsed_ms,
        )
