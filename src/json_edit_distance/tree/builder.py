"""TreeBuilder: converts any JSON-like value into a canonical TreeNode tree.

Uses recursive dispatch to convert mappings, sequences, and scalar values into
an immutable tree of TreeNode objects:

- Mappings become OBJECT nodes whose KEY children are sorted by label in
  ascending code-point order, each KEY owning the member value as sole child.
- Lists and tuples become ARRAY nodes with one child per element, in order.
- Scalars, None and MISSING become LITERAL nodes labeled with a canonical
  string form.  Comparison downstream is by label equality only, so ``42``
  and ``"42"`` produce the same label.

Containers may nest at most ``MAX_DEPTH`` levels deep.  Both the builder and
the distance engine recurse once per level, so deeper input is rejected with
``ValueError`` rather than exhausting the interpreter stack.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from json_edit_distance.tree.nodes import (
    MISSING,
    MISSING_LABEL,
    NULL_LABEL,
    NodeType,
    TreeNode,
)

MAX_DEPTH = 128


def literal_label(value: Any) -> str:
    """Return the canonical string form of a scalar value.

    Raises:
        TypeError: If ``value`` is not a JSON scalar, None or MISSING.
        ValueError: If ``value`` is an int too large for decimal conversion
            under the interpreter's ``sys.get_int_max_str_digits()`` limit.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return NULL_LABEL
    if value is MISSING:
        return MISSING_LABEL
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError as exc:
            msg = f"Integer literal too large to label: {exc}"
            raise ValueError(msg) from exc
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass
class TreeBuilder:
    """Converts any JSON-like value into a canonical TreeNode tree.

    The builder is stateless between calls; ``build`` may be called
    repeatedly and from several threads on independent inputs.

    Example::

        builder = TreeBuilder()
        tree = builder.build({"b": 1, "a": [True, None]})
        # OBJECT -> KEY("a") -> ARRAY -> LITERAL("true"), LITERAL("null")
        #        -> KEY("b") -> LITERAL("1")
    """

    def build(self, value: Any) -> TreeNode:
        """Convert a JSON-like value to a TreeNode tree.

        Args:
            value: A mapping, list, tuple, str, int, float, bool, None or MISSING.

        Returns:
            The root TreeNode of the canonical tree.

        Raises:
            TypeError:  If the value (or a nested value or mapping key) is not
                        a supported type.
            ValueError: If a container contains itself, containers nest more
                        than ``MAX_DEPTH`` levels deep, two mapping keys share
                        a canonical label, or an int is too large to label.
        """
        return self._build(value, set())

    def _build(self, value: Any, active: set[int]) -> TreeNode:
        if isinstance(value, Mapping):
            return self._build_container(value, active, self._build_object)
        if isinstance(value, (list, tuple)):
            return self._build_container(value, active, self._build_array)
        return TreeNode(node_type=NodeType.LITERAL, label=literal_label(value))

    def _build_container(
        self,
        value: Any,
        active: set[int],
        build_fn: Callable[[Any, set[int]], TreeNode],
    ) -> TreeNode:
        marker = id(value)
        if marker in active:
            raise ValueError("Circular reference detected")
        # active holds exactly the containers on the current path
        if len(active) >= MAX_DEPTH:
            raise ValueError(f"Maximum nesting depth of {MAX_DEPTH} exceeded")
        active.add(marker)
        try:
            return build_fn(value, active)
        finally:
            active.discard(marker)

    def _build_object(self, obj: Mapping[Any, Any], active: set[int]) -> TreeNode:
        """Build an OBJECT node with KEY children in code-point label order.

        Labels must be unique within one object; ``{1: "x", "1": "y"}`` is
        rejected because both keys canonicalize to ``"1"``.
        """
        members = sorted(
            ((self._key_label(key), val) for key, val in obj.items()),
            key=lambda member: member[0],
        )
        for (label, _), (next_label, _) in zip(members, members[1:], strict=False):
            if label == next_label:
                raise ValueError(f"Duplicate JSON object key label: {label!r}")
        keys = tuple(
            TreeNode(
                node_type=NodeType.KEY,
                label=label,
                children=(self._build(val, active),),
            )
            for label, val in members
        )
        return TreeNode(node_type=NodeType.OBJECT, children=keys)

    def _build_array(
        self, arr: list[Any] | tuple[Any, ...], active: set[int]
    ) -> TreeNode:
        """Build an ARRAY node whose children follow element order."""
        items = tuple(self._build(item, active) for item in arr)
        return TreeNode(node_type=NodeType.ARRAY, children=items)

    @staticmethod
    def _key_label(key: Any) -> str:
        if isinstance(key, str):
            return key
        if key is MISSING or isinstance(key, (Mapping, list, tuple)):
            raise TypeError(f"Unsupported JSON object key type: {type(key)!r}")
        return literal_label(key)
