"""DistanceCache: LRU-backed caching proxy for any StringDistance.

Wraps any StringDistance-conformant object and memoizes ``distance()``
results per unordered label pair.  The ArrayMatcher and ObjectMatcher score
every candidate pair, so the same two literal labels are frequently compared
many times within a single computation.  LRU eviction occurs silently when
``max_size`` is exceeded.

Each ``DistanceCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state, so two separate instances never interfere with
each other.  Caching never changes a computed value.

Example::

    from json_edit_distance.cache import DistanceCache
    from json_edit_distance.distances import LevenshteinDistance

    cache = DistanceCache(LevenshteinDistance(), max_size=512)
    cache.distance("kitten", "sitting")   # computed
    cache.distance("sitting", "kitten")   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_edit_distance.protocols import StringDistance


class DistanceCache:
    """LRU-backed caching proxy around any StringDistance.

    Satisfies the ``StringDistance`` Protocol structurally.  Pairs are keyed
    order-independently, relying on the symmetry the Protocol requires.

    Args:
        backend: Any object satisfying the ``StringDistance`` Protocol.
        max_size: Maximum number of label pairs held in memory.  Defaults
            to 512.
    """

    def __init__(self, backend: StringDistance, max_size: int = 512) -> None:
        self._backend: Any = backend
        self._cache: LRUCache[tuple[str, str], float] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def distance(self, a: str, b: str) -> float:
        """Return the backend distance for ``(a, b)``, computing it at most once."""
        key = (a, b) if a <= b else (b, a)
        try:
            return self._cache[key]
        except KeyError:
            pass
        value = float(self._backend.distance(a, b))
        self._cache[key] = value
        return value
