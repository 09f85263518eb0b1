"""Cost functions for JEDI tree edit distance.

Unit costs follow the JEDI convention: deleting and inserting a node each
cost 1, so removing or adding a whole subtree costs 2 per node.

- cost_delete / cost_insert: ``2 * size(node)`` for a whole subtree.
- cost_kind_mismatch: full deletion of one subtree plus insertion of the other.
- cost_key_rename: structural change of a member name (2.0).
- cost_literal: value modification (1.0, or weighted by string distance).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_edit_distance.algorithm.config import JEDIConfig
from json_edit_distance.tree.nodes import TreeNode, tree_size

if TYPE_CHECKING:
    from json_edit_distance.protocols import StringDistance

NODE_COST = 2.0
KEY_RENAME_COST = 2.0
LITERAL_UPDATE_COST = 1.0
REORDER_COST = 0.5


def cost_delete(node: TreeNode | None) -> float:
    """Cost of deleting ``node``'s whole subtree."""
    return NODE_COST * tree_size(node)


def cost_insert(node: TreeNode | None) -> float:
    """Cost of inserting ``node``'s whole subtree."""
    return NODE_COST * tree_size(node)


def cost_kind_mismatch(node_a: TreeNode, node_b: TreeNode) -> float:
    """Delete ``node_a`` entirely and insert ``node_b``; no structural reuse."""
    return cost_delete(node_a) + cost_insert(node_b)


def cost_key_rename(node_a: TreeNode, node_b: TreeNode) -> float:
    """2.0 when two KEY labels differ, else 0.0."""
    return 0.0 if node_a.label == node_b.label else KEY_RENAME_COST


def cost_literal(
    node_a: TreeNode,
    node_b: TreeNode,
    config: JEDIConfig,
    string_distance: StringDistance,
) -> float:
    """Compute the update cost between two LITERAL nodes.

    Returns:
        0.0 for equal labels.  Otherwise 1.0, or in weighted mode
        ``1.0 * string_distance(label_a, label_b)``.
    """
    if node_a.label == node_b.label:
        return 0.0
    if not config.weighted_literals:
        return LITERAL_UPDATE_COST
    return LITERAL_UPDATE_COST * string_distance.distance(
        node_a.label or "", node_b.label or ""
    )
