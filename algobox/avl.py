"""A self-balancing AVL tree that reports positions in heap numbering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    key: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    assert child is not None
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    assert child is not None
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    return _rebalance(node)


def _remove(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _remove(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """An AVL tree; equal keys go to the right.

    Positions number the root 1 and the children of position ``p`` as
    ``2p`` (left) and ``2p + 1`` (right).
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, key: int) -> None:
        """Add ``key`` and rebalance."""
        self._root = _insert(self._root, key)
        self._size += 1

    def remove(self, key: int) -> int:
        """Remove one ``key`` and return the position it was found at."""
        position = self.search(key)
        if position is None:
            raise KeyError(key)
        self._root = _remove(self._root, key)
        self._size -= 1
        return position

    def search(self, key: int) -> Optional[int]:
        """Position of ``key``, or None when it is not in the tree."""
        node = self._root
        position = 1
        while node is not None:
            if key == node.key:
                return position
            if key < node.key:
                node = node.left
                position *= 2
            else:
                node = node.right
                position = 2 * position + 1
        return None

    def height(self) -> int:
        """Number of levels in the tree; 0 when it is empty."""
        return _height(self._root)

    def render(self) -> str:
        """A sideways drawing: each line shows a key and its parent's key (-1 for the root)."""
        lines: list[str] = []

        def draw(node: Optional[_Node], indent: str, last: bool, parent: int) -> None:
            if node is None:
                return
            marker = "R----" if last else "L----"
            lines.append(f"{indent}{marker}{node.key} {parent}")
            child_indent = indent + ("   " if last else "|  ")
            draw(node.left, child_indent, False, node.key)
            draw(node.right, child_indent, True, node.key)

        draw(self._root, "", True, -1)
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __iter__(self) -> Iterator[int]:
        """Keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size