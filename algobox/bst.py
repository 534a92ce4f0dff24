"""An unbalanced binary search tree that reports positions in heap numbering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """A binary search tree; equal values go to the right.

    Positions number the root 1 and the children of position ``p`` as
    ``2p`` (left) and ``2p + 1`` (right).
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def add(self, value: int) -> None:
        """Insert ``value``."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def _find(
        self, value: int
    ) -> Optional[tuple[_Node, Optional[_Node], int]]:
        parent: Optional[_Node] = None
        node = self._root
        position = 1
        while node is not None:
            if value == node.value:
                return node, parent, position
            parent = node
            if value < node.value:
                node = node.left
                position *= 2
            else:
                node = node.right
                position = 2 * position + 1
        return None

    def _replace(
        self, parent: Optional[_Node], old: _Node, new: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, value: int) -> int:
        """Remove one ``value`` and return the position it was found at."""
        found = self._find(value)
        if found is None:
            raise KeyError(value)
        node, parent, position = found
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            self._replace(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace(parent, node, child)
        self._size -= 1
        return position

    def search(self, value: int) -> Optional[int]:
        """Position of ``value``, or None when it is not in the tree."""
        found = self._find(value)
        return None if found is None else found[2]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self._find(value) is not None

    def __iter__(self) -> Iterator[int]:
        """Values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size