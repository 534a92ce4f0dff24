from hypothesis import given, strategies as st

from algobox.leetcode_nodes import (
    ListNode,
    NaryNode,
    TreeNode,
    detect_cycle,
    level_order,
    merge_two_lists,
    middle_node,
    preorder,
    reverse_list,
)

values = st.lists(st.integers(-100, 100), max_size=20)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _heap_tree(items):
    nodes = [TreeNode(value) for value in items]
    for index, node in enumerate(nodes):
        if 2 * index + 1 < len(nodes):
            node.left = nodes[2 * index + 1]
        if 2 * index + 2 < len(nodes):
            node.right = nodes[2 * index + 2]
    return nodes[0] if nodes else None


@given(values)
def test_from_values_round_trip(items):
    head = ListNode.from_values(items)
    assert (list(head) if head is not None else []) == items


def test_from_values_empty_is_none():
    assert ListNode.from_values([]) is None


@given(values)
def test_reverse_list(items):
    reversed_head = reverse_list(ListNode.from_values(items))
    assert (list(reversed_head) if reversed_head is not None else []) == items[::-1]


@given(st.lists(st.integers(-50, 50), max_size=10), st.lists(st.integers(-50, 50), max_size=10))
def test_merge_two_sorted_lists(a, b):
    merged = merge_two_lists(ListNode.from_values(sorted(a)), ListNode.from_values(sorted(b)))
    assert (list(merged) if merged is not None else []) == sorted(a + b)


def test_merge_keeps_original_nodes():
    first = ListNode.from_values([1, 4])
    second = ListNode.from_values([2, 3])
    originals = {id(node) for node in _nodes(first) + _nodes(second)}
    merged = merge_two_lists(first, second)
    assert {id(node) for node in _nodes(merged)} == originals


@given(st.integers(1, 30))
def test_middle_node(n):
    head = ListNode.from_values(range(n))
    assert middle_node(head).val == n // 2


def test_middle_of_empty_list():
    assert middle_node(None) is None


@given(st.integers(1, 15), st.data())
def test_detect_cycle_finds_entry(n, data):
    head = ListNode.from_values(range(n))
    nodes = _nodes(head)
    entry = data.draw(st.integers(0, n - 1))
    nodes[-1].next = nodes[entry]
    assert detect_cycle(head) is nodes[entry]


@given(values)
def test_detect_cycle_without_cycle(items):
    assert detect_cycle(ListNode.from_values(items)) is None


def test_level_order_example():
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    assert level_order(root) == [[3], [9, 20], [15, 7]]


@given(values)
def test_level_order_of_complete_tree_follows_array(items):
    levels = level_order(_heap_tree(items))
    assert [value for level in levels for value in level] == items
    assert all(len(level) == 2**depth for depth, level in enumerate(levels[:-1]))


def test_level_order_empty():
    assert level_order(None) == []


def test_preorder_example():
    root = NaryNode(1, [NaryNode(3, [NaryNode(5), NaryNode(6)]), NaryNode(2), NaryNode(4)])
    assert preorder(root) == [1, 3, 5, 6, 2, 4]


def test_preorder_skips_missing_children():
    root = NaryNode(7, [None, NaryNode(8), None])
    assert preorder(root) == [7, 8]
    assert preorder(None) == []


@given(values)
def test_preorder_of_chain(items):
    root = None
    for value in reversed(items):
        root = NaryNode(value, [root] if root is not None else [])
    assert preorder(root) == items