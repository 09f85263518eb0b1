"""StringDistance Protocol for the weighted literal cost extension point.

Defines the structural interface a literal string-distance function must
satisfy.  Any class with a conformant ``distance`` method passes
``isinstance`` checks, without inheriting from a base class.

Example::

    from json_edit_distance.protocols import StringDistance

    class CaseInsensitive:
        def distance(self, a: str, b: str) -> float:
            return 0.0 if a.lower() == b.lower() else 1.0

    assert isinstance(CaseInsensitive(), StringDistance)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StringDistance(Protocol):
    """Structural protocol for literal string distances.

    The ``distance`` method must:
    - Return 0.0 for equal strings.
    - Return a float in (0.0, 1.0] for differing strings.
    - Be symmetric and free of side effects visible to the caller.
    """

    def distance(self, a: str, b: str) -> float: ...
