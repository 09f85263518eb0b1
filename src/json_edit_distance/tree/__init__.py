"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: frozen dataclass representing a node in the canonical tree
- NodeType: StrEnum of the four node kinds (OBJECT, ARRAY, KEY, LITERAL)
- TreeBuilder: converts any JSON-like value into a canonical TreeNode tree
- MISSING: sentinel for an explicitly missing value, distinct from None
- tree_size: subtree node count (0 for an absent node)
"""

from json_edit_distance.tree.builder import TreeBuilder, literal_label
from json_edit_distance.tree.nodes import MISSING, NodeType, TreeNode, tree_size

__all__ = ["MISSING", "NodeType", "TreeBuilder", "TreeNode", "literal_label", "tree_size"]
