"""JEDIAlgorithm: recursive JSON edit distance.

Implements JEDI (JSON Edit Distance), a tree edit distance tuned to JSON:
object members are matched as a set, array elements as a sequence.

Architecture:
- Absent node:    deleting/inserting the other subtree, 2 per node.
- Kind mismatch:  full delete of the left subtree plus insert of the right.
- KEY nodes:      2.0 for a rename + distance of the single value child.
- LITERAL nodes:  0.0 if labels match, else 1.0 (or weighted string distance).
- OBJECT nodes:   KEY children matched order-independently; no reorder cost.
- ARRAY nodes:    elements matched by content, then 0.5 per inverted pair.

The critical invariant: ``distance`` returns a raw, unnormalized cost.  The
public ``compute`` method is the only place a [0, 1] similarity is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from json_edit_distance.algorithm.config import JEDIConfig, MatchingStrategy
from json_edit_distance.algorithm.costs import (
    REORDER_COST,
    cost_delete,
    cost_insert,
    cost_key_rename,
    cost_kind_mismatch,
    cost_literal,
)
from json_edit_distance.algorithm.matcher import (
    Pair,
    count_inversions,
    greedy_match,
    hungarian_match,
    label_seed_pairs,
    zero_cost_seed_pairs,
)
from json_edit_distance.algorithm.normalizer import normalize_similarity
from json_edit_distance.distances import LevenshteinDistance
from json_edit_distance.tree.builder import TreeBuilder
from json_edit_distance.tree.nodes import NodeType, TreeNode

if TYPE_CHECKING:
    from json_edit_distance.protocols import StringDistance


class JEDIAlgorithm:
    """Recursive JEDI algorithm for JSON similarity.

    Accepts any two JSON-like values and returns a similarity score in
    [0.0, 1.0]: 1.0 means canonically identical, 0.0 the theoretical worst.

    Example::

        from json_edit_distance.algorithm import JEDIAlgorithm

        algo = JEDIAlgorithm()
        algo.compute({"a": 1, "b": 2}, {"b": 2, "a": 1})   # 1.0
        algo.compute(["A", "B", "C"], ["A", "C", "B"])     # < 1.0
    """

    def __init__(
        self,
        config: JEDIConfig | None = None,
        string_distance: StringDistance | None = None,
    ) -> None:
        """Initialise the algorithm.

        Args:
            config: Algorithm options.  Defaults to ``JEDIConfig()``
                (fixed literal costs, SUM normalization, GREEDY matching).
            string_distance: Literal distance used in weighted mode.
                Defaults to ``LevenshteinDistance()``.
        """
        self._config = config if config is not None else JEDIConfig()
        self._string_distance: StringDistance = (
            string_distance if string_distance is not None else LevenshteinDistance()
        )
        self._builder = TreeBuilder()

    @property
    def config(self) -> JEDIConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, json_a: Any, json_b: Any) -> float:
        """Compute the similarity between two JSON-like values.

        Returns:
            Float in [0.0, 1.0].
        """
        root_a = self._builder.build(json_a)
        root_b = self._builder.build(json_b)
        return self.similarity(root_a, root_b)

    def compute_distance(self, json_a: Any, json_b: Any) -> float:
        """Compute the raw JEDI distance between two JSON-like values."""
        return self.distance(self._builder.build(json_a), self._builder.build(json_b))

    def similarity(self, root_a: TreeNode, root_b: TreeNode) -> float:
        """Normalized similarity between two already-built trees."""
        return normalize_similarity(
            self.distance(root_a, root_b),
            root_a.size,
            root_b.size,
            self._config.normalization,
        )

    def distance(self, node_a: TreeNode | None, node_b: TreeNode | None) -> float:
        """Compute the raw edit distance between two nodes.

        Either side may be None, meaning "no corresponding node".

        Returns:
            Non-negative float distance (may exceed 1.0).
        """
        if node_a is None:
            return cost_insert(node_b)
        if node_b is None:
            return cost_delete(node_a)

        if node_a.node_type != node_b.node_type:
            return cost_kind_mismatch(node_a, node_b)

        node_type = node_a.node_type

        if node_type == NodeType.LITERAL:
            return cost_literal(node_a, node_b, self._config, self._string_distance)

        if node_type == NodeType.KEY:
            return cost_key_rename(node_a, node_b) + self.distance(
                node_a.children[0], node_b.children[0]
            )

        if node_type == NodeType.OBJECT:
            return self._match_object_children(node_a.children, node_b.children)

        return self._match_array_children(node_a.children, node_b.children)

    # ------------------------------------------------------------------
    # Child matching
    # ------------------------------------------------------------------

    def _cost_matrix(
        self,
        children_a: tuple[TreeNode, ...],
        children_b: tuple[TreeNode, ...],
    ) -> np.ndarray:
        """Score every (source, destination) pair with a recursive distance."""
        cost_matrix = np.empty((len(children_a), len(children_b)), dtype=float)
        for i, ca in enumerate(children_a):
            for j, cb in enumerate(children_b):
                cost_matrix[i, j] = self.distance(ca, cb)
        return cost_matrix

    def _unmatched_cost(
        self,
        children_a: tuple[TreeNode, ...],
        children_b: tuple[TreeNode, ...],
        pairs: list[Pair],
    ) -> float:
        matched_a = {i for i, _ in pairs}
        matched_b = {j for _, j in pairs}
        deleted = sum(
            cost_delete(node) for i, node in enumerate(children_a) if i not in matched_a
        )
        inserted = sum(
            cost_insert(node) for j, node in enumerate(children_b) if j not in matched_b
        )
        return float(deleted + inserted)

    def _match_object_children(
        self,
        children_a: tuple[TreeNode, ...],
        children_b: tuple[TreeNode, ...],
    ) -> float:
        """Match KEY children as a set; member order never affects the cost."""
        if not children_a or not children_b:
            return self._unmatched_cost(children_a, children_b, [])

        cost_matrix = self._cost_matrix(children_a, children_b)
        if self._config.matching == MatchingStrategy.OPTIMAL:
            pairs = hungarian_match(cost_matrix)
        else:
            seeds = label_seed_pairs(
                [c.label for c in children_a], [c.label for c in children_b]
            )
            pairs = greedy_match(cost_matrix, seeds)

        matched_cost = sum(float(cost_matrix[i, j]) for i, j in pairs)
        return matched_cost + self._unmatched_cost(children_a, children_b, pairs)

    def _match_array_children(
        self,
        children_a: tuple[TreeNode, ...],
        children_b: tuple[TreeNode, ...],
    ) -> float:
        """Match elements by content, then charge 0.5 per inverted pair."""
        if not children_a or not children_b:
            return self._unmatched_cost(children_a, children_b, [])

        cost_matrix = self._cost_matrix(children_a, children_b)
        if self._config.matching == MatchingStrategy.OPTIMAL:
            pairs = hungarian_match(cost_matrix)
        else:
            pairs = greedy_match(cost_matrix, zero_cost_seed_pairs(cost_matrix))

        matched_cost = sum(float(cost_matrix[i, j]) for i, j in pairs)
        reorder_cost = REORDER_COST * count_inversions(pairs)
        return (
            matched_cost
            + self._unmatched_cost(children_a, children_b, pairs)
            + reorder_cost
        )
