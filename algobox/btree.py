"""A B-tree of integer keys with a configurable minimum degree."""

from __future__ import annotations

from bisect import bisect_left, insort_right
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class _Node:
    leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)


class BTree:
    """A B-tree in which every node holds between ``degree - 1`` and ``2 * degree - 1`` keys."""

    def __init__(self, degree: int) -> None:
        if degree < 2:
            raise ValueError("degree must be at least 2")
        self._t = degree
        self._root: Optional[_Node] = None

    @property
    def degree(self) -> int:
        return self._t

    def _full(self, node: _Node) -> bool:
        return len(node.keys) == 2 * self._t - 1

    def _split_child(self, parent: _Node, i: int) -> None:
        t = self._t
        child = parent.children[i]
        right = _Node(child.leaf, child.keys[t:], child.children[t:])
        median = child.keys[t - 1]
        child.keys = child.keys[: t - 1]
        child.children = child.children[:t]
        parent.keys.insert(i, median)
        parent.children.insert(i + 1, right)

    def _insert_nonfull(self, node: _Node, key: int) -> None:
        while not node.leaf:
            i = bisect_left(node.keys, key)
            if self._full(node.children[i]):
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]
        insort_right(node.keys, key)

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        if self._root is None:
            self._root = _Node(True, [key])
            return
        if self._full(self._root):
            new_root = _Node(False, [], [self._root])
            self._split_child(new_root, 0)
            self._root = new_root
        self._insert_nonfull(self._root, key)

    def delete(self, key: int) -> None:
        """Remove one ``key``; raise KeyError when it is absent."""
        if self._root is None:
            raise KeyError(key)
        self._delete(self._root, key)
        if not self._root.keys:
            self._root = None if self._root.leaf else self._root.children[0]

    def _delete(self, node: _Node, key: int) -> None:
        t = self._t
        i = bisect_left(node.keys, key)
        if i < len(node.keys) and node.keys[i] == key:
            if node.leaf:
                node.keys.pop(i)
            elif len(node.children[i].keys) >= t:
                predecessor = self._max_key(node.children[i])
                node.keys[i] = predecessor
                self._delete(node.children[i], predecessor)
            elif len(node.children[i + 1].keys) >= t:
                successor = self._min_key(node.children[i + 1])
                node.keys[i] = successor
                self._delete(node.children[i + 1], successor)
            else:
                self._merge(node, i)
                self._delete(node.children[i], key)
            return
        if node.leaf:
            raise KeyError(key)
        was_last = i == len(node.keys)
        if len(node.children[i].keys) < t:
            self._fill(node, i)
        if was_last and i > len(node.keys):
            i -= 1
        self._delete(node.children[i], key)

    @staticmethod
    def _max_key(node: _Node) -> int:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _min_key(node: _Node) -> int:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _fill(self, node: _Node, i: int) -> None:
        t = self._t
        if i > 0 and len(node.children[i - 1].keys) >= t:
            child, sibling = node.children[i], node.children[i - 1]
            child.keys.insert(0, node.keys[i - 1])
            if not child.leaf:
                child.children.insert(0, sibling.children.pop())
            node.keys[i - 1] = sibling.keys.pop()
        elif i < len(node.keys) and len(node.children[i + 1].keys) >= t:
            child, sibling = node.children[i], node.children[i + 1]
            child.keys.append(node.keys[i])
            if not child.leaf:
                child.children.append(sibling.children.pop(0))
            node.keys[i] = sibling.keys.pop(0)
        elif i < len(node.keys):
            self._merge(node, i)
        else:
            self._merge(node, i - 1)

    @staticmethod
    def _merge(node: _Node, i: int) -> None:
        child = node.children[i]
        sibling = node.children.pop(i + 1)
        child.keys.append(node.keys.pop(i))
        child.keys.extend(sibling.keys)
        child.children.extend(sibling.children)

    def search(self, key: int) -> bool:
        """Whether ``key`` is in the tree."""
        node = self._root
        while node is not None:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return True
            if node.leaf:
                return False
            node = node.children[i]
        return False

    def traverse(self) -> list[int]:
        """All keys in ascending order."""
        result: list[int] = []

        def walk(node: _Node) -> None:
            for i, key in enumerate(node.keys):
                if not node.leaf:
                    walk(node.children[i])
                result.append(key)
            if not node.leaf:
                walk(node.children[-1])

        if self._root is not None:
            walk(self._root)
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)

    def __len__(self) -> int:
        return len(self.traverse())