"""Nodes of a red-black tree keyed by (student id, subject) and helpers on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

NodeKey = Tuple[int, str]


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "R"
    BLACK = "B"


class Direction(Enum):
    """Where a key belongs relative to the node a search stopped at."""

    LEFT = "L"
    RIGHT = "R"
    SELF = "A"
    EMPTY = "E"


@dataclass(eq=False)
class Node:
    """A tree node; new nodes start red and unlinked."""

    key: NodeKey
    payload: Any = None
    color: Color = Color.RED
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)

    def flip(self) -> None:
        """Swap the node's colour between red and black."""
        self.color = Color.BLACK if self.color is Color.RED else Color.RED


def compare_keys(a: NodeKey, b: NodeKey) -> int:
    """Return -1, 0 or 1 as ``a`` orders before, equal to or after ``b``."""
    return (a > b) - (a < b)


def is_black(node: Optional[Node]) -> bool:
    """A missing node counts as black."""
    return node is None or node.color is Color.BLACK


def is_double_red(node: Node) -> bool:
    """True when the node and its parent are both red."""
    if node.color is Color.BLACK or node.parent is None:
        return False
    return node.parent.color is Color.RED


def sibling(node: Node) -> Optional[Node]:
    """Return the other child of the node's parent."""
    parent = node.parent
    if parent is None:
        raise ValueError("the root node has no sibling")
    return parent.right if parent.left is node else parent.left


def node_depth(node: Node) -> int:
    """Number of edges between the node and the root."""
    depth = 0
    while node.parent is not None:
        node = node.parent
        depth += 1
    return depth


def search_parent_or_self(
    node: Optional[Node], key: NodeKey
) -> tuple[Optional[Node], Direction]:
    """Find the node holding ``key`` or the parent a new node for it would hang from.

    Returns ``(None, Direction.EMPTY)`` for an empty subtree.
    """
    if node is None:
        return None, Direction.EMPTY
    while True:
        order = compare_keys(node.key, key)
        if order > 0:
            if node.left is None:
                return node, Direction.LEFT
            node = node.left
        elif order < 0:
            if node.right is None:
                return node, Direction.RIGHT
            node = node.right
        else:
            return node, Direction.SELF