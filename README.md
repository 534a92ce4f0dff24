# algobox

A collection of classic algorithms, data structures and small programming-contest
solutions, written as plain Python functions and classes. It uses only the
standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `counting_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` (each returns a new sorted list) |
| `algobox.searching` | `binary_search`, `linear_search`, `find_pattern` |
| `algobox.dp` | `fibonacci`, `grid_traveller`, `can_sum`, `how_sum`, `best_sum`, `can_construct`, `count_construct`, `all_construct` |
| `algobox.greedy` | `fill_knapsack`, `fill_fractional_knapsack`, `select_activities`, `sequence_jobs`, with the `Item`, `KnapsackResult`, `Activity` and `ScheduledJob` records |
| `algobox.numeric` | `binary_power`, `fast_power` (both reduce modulo 1_000_000_007), `euclidean_gcd`, `karatsuba` |
| `algobox.stack` | `ArrayStack` (bounded), `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `algobox.queues` | `LinearQueue`, `CircularQueue`, `BoundedDeque`, `PriorityQueue`, `QueueEmptyError`, `QueueFullError` |
| `algobox.graph` | `AdjacencyListGraph`, `AdjacencyMatrixGraph`, each with a `format()` text dump |
| `algobox.dynamic_array` | `DynamicArray`, `to_rows` |
| `algobox.bst` | `BinarySearchTree` |
| `algobox.avl` | `AVLTree` |
| `algobox.btree` | `BTree` |
| `algobox.leetcode_arrays`, `algobox.leetcode_strings`, `algobox.leetcode_grids`, `algobox.leetcode_nodes` | solutions to well-known interview problems; `leetcode_nodes` also provides `ListNode`, `TreeNode` and `NaryNode` |
| `algobox.codechef`, `algobox.spoj` | solutions to contest problems, one function per problem |

`BinarySearchTree` and `AVLTree` report positions in heap numbering: the root
is position 1 and the children of position `p` are `2p` and `2p + 1`.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.dp import how_sum, count_construct
from algobox.stack import ArrayStack
from algobox.queues import PriorityQueue
from algobox.btree import BTree

merge_sort([9, 1, 5, 122, 2, 10, 0, 9])   # [0, 1, 2, 5, 9, 9, 10, 122]
how_sum(13, [2, 4, 5])                     # a list summing to 13, or None
count_construct("aaaa", ["a", "aa", "aaa", "aaaa"])   # 8

stack = ArrayStack(10)
stack.push(3)
stack.push(7)
stack.pop()                                # 7

queue = PriorityQueue()
queue.add("b", 2)
queue.add("a", 1)
queue.poll()                               # ("a", 1)

tree = BTree(3)
for key in range(1, 12):
    tree.insert(key)
tree.delete(5)
5 in tree                                  # False
tree.traverse()                            # remaining keys in ascending order
```

## Errors

Operations that cannot proceed raise an exception rather than printing a
message: popping an empty stack raises `StackEmptyError`, adding to a full
bounded queue raises `QueueFullError`, taking from an empty queue raises
`QueueEmptyError`, and removing a missing key from `BinarySearchTree`,
`AVLTree` or `BTree` raises `KeyError`. `AdjacencyMatrixGraph.add_edge` is the
exception: it silently ignores edges that name a vertex outside the graph.

## What it does not do

algobox is a library only. It installs no commands, and the contest solutions
in `algobox.codechef` and `algobox.spoj` are plain functions that take their
values as arguments; nothing in the package reads problem input from standard
input or prints answers.