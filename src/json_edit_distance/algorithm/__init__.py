"""algorithm subpackage: public API for the JEDI algorithm.

Provides the recursive distance engine, its configuration, and the option
enums.  Import from this module (not from sub-modules directly) to stay on
the stable public interface.

Example::

    from json_edit_distance.algorithm import JEDIAlgorithm, JEDIConfig

    algo = JEDIAlgorithm(JEDIConfig(weighted_literals=True))
    score = algo.compute({"name": "John Smith"}, {"name": "Jon Smith"})
    # score > 0.99  (one-character typo)
"""

from __future__ import annotations

from json_edit_distance.algorithm.config import (
    JEDIConfig,
    MatchingStrategy,
    NormalizationMode,
)
from json_edit_distance.algorithm.jedi import JEDIAlgorithm

__all__ = ["JEDIAlgorithm", "JEDIConfig", "MatchingStrategy", "NormalizationMode"]
