"""Insert-only red-black tree keyed by (student id, subject)."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from coursealgo.rbnode import (
    Color,
    Direction,
    Node,
    NodeKey,
    is_black,
    is_double_red,
    search_parent_or_self,
    sibling,
)


class RedBlackTree:
    """A red-black tree that supports insertion and in-order iteration."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        """Yield the nodes in ascending key order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def insert(self, key: NodeKey, payload: Any) -> Tuple[Node, bool]:
        """Insert ``key`` with ``payload``.

        Returns the node holding the key and whether the key was already
        present. An existing node is returned untouched, payload included.
        """
        if self.root is None:
            node = Node(key, payload, color=Color.BLACK)
            self.root = node
            self._size += 1
            return node, False

        parent, direction = search_parent_or_self(self.root, key)
        if parent is None:
            raise RuntimeError("search failed on a non-empty tree")
        if direction is Direction.SELF:
            return parent, True

        node = Node(key, payload, parent=parent)
        if direction is Direction.LEFT:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._rebalance(node)
        return node, False

    def _rebalance(self, node: Node) -> None:
        while is_double_red(node):
            assert node.parent is not None
            if is_black(sibling(node.parent)):
                self._restructure(node)
                break
            node = self._recolor(node)

    def _restructure(self, node: Node) -> None:
        parent = node.parent
        assert parent is not None and parent.parent is not None
        grandparent = parent.parent

        if grandparent.right is parent:
            if parent.left is node:
                node.color = Color.BLACK
                parent.color = Color.RED
                grandparent.color = Color.RED
                self._rotate_right(parent)
                self._rotate_left(grandparent)
            else:
                parent.color = Color.BLACK
                node.color = Color.RED
                grandparent.color = Color.RED
                self._rotate_left(grandparent)
        else:
            if parent.left is node:
                parent.color = Color.BLACK
                node.color = Color.RED
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                node.color = Color.BLACK
                parent.color = Color.RED
                grandparent.color = Color.RED
                self._rotate_left(parent)
                self._rotate_right(grandparent)

    def _recolor(self, node: Node) -> Node:
        parent = node.parent
        assert parent is not None and parent.parent is not None
        grandparent = parent.parent

        grandparent.flip()
        parent.flip()
        uncle = sibling(parent)
        if uncle is not None:
            uncle.flip()

        if grandparent is self.root and grandparent.color is Color.RED:
            grandparent.color = Color.BLACK
        return grandparent

    def _replace_child(self, old: Node, new: Node) -> None:
        parent = new.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_right(self, old_root: Node) -> None:
        new_root = old_root.left
        assert new_root is not None
        middle = new_root.right

        new_root.right = old_root
        old_root.left = middle
        if middle is not None:
            middle.parent = old_root

        new_root.parent = old_root.parent
        old_root.parent = new_root
        self._replace_child(old_root, new_root)

    def _rotate_left(self, old_root: Node) -> None:
        new_root = old_root.right
        assert new_root is not None
        middle = new_root.left

        new_root.left = old_root
        old_root.right = middle
        if middle is not None:
            middle.parent = old_root

        new_root.parent = old_root.parent
        old_root.parent = new_root
        self._replace_child(old_root, new_root)