"""Linked list and tree node types with traversal and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a linked list holding ``values``; None when there are none."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree with any number of children."""

    val: int = 0
    children: list[NaryNode | None] = field(default_factory=list)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values of a binary tree grouped by depth, left to right."""
    levels: list[list[int]] = []
    frontier = [root] if root is not None else []
    while frontier:
        levels.append([node.val for node in frontier])
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Node where a cycle in the list begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            while slow is not head:
                slow = slow.next
                head = head.next
            return head
    return None


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Splice two sorted linked lists into one sorted list."""
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def preorder(root: NaryNode | None) -> list[int]:
    """Values of an n-ary tree in preorder."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        stack.extend(child for child in reversed(node.children) if child is not None)
    return result


def middle_node(head: ListNode | None) -> ListNode | None:
    """The middle node of a list; the second middle when the length is even."""
    if head is None:
        return None
    length = sum(1 for _ in head)
    for _ in range(length // 2):
        head = head.next
    return head