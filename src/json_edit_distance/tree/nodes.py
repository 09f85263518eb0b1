"""TreeNode dataclass and NodeType StrEnum for the canonical JSON tree.

Provides the foundational data types used by TreeBuilder to convert JSON
values into immutable labeled trees for JEDI distance computation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Final


class NodeType(StrEnum):
    """Enumeration of the four node kinds in a canonical JSON tree.

    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - KEY     -> "key"     : A member name within an object (one value child)
    - LITERAL -> "literal" : A leaf value (string, number, bool, null, missing)
    """

    OBJECT = auto()
    ARRAY = auto()
    KEY = auto()
    LITERAL = auto()


class _Missing:
    """Singleton marker for an explicitly missing (undefined) value."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

NULL_LABEL: Final = "null"
MISSING_LABEL: Final = "undefined"


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the canonical JSON tree.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        label:     Member name for KEY nodes; canonical string form for LITERAL
                   nodes; None for structural nodes (OBJECT, ARRAY).
        children:  Owned child nodes.  A tuple, so a built tree is immutable.
        size:      Number of nodes in the subtree rooted here (computed).
    """

    node_type: NodeType
    label: str | None = None
    children: tuple[TreeNode, ...] = ()
    size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.node_type == NodeType.KEY and len(self.children) != 1:
            msg = f"KEY node must have exactly one child, got {len(self.children)}"
            raise ValueError(msg)
        if self.node_type == NodeType.LITERAL and self.children:
            msg = "LITERAL node cannot have children"
            raise ValueError(msg)
        object.__setattr__(
            self, "size", 1 + sum(child.size for child in self.children)
        )


def tree_size(node: TreeNode | None) -> int:
    """Return the number of nodes in ``node``'s subtree, 0 for an absent node."""
    if node is None:
        return 0
    return node.size
