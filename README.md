# dsakit

Compact, dependency-free implementations of classic data structures and
algorithms: array operations, integer recursions, binary heaps, graph
traversal over adjacency matrices, a singly linked list, stacks, queues and
binary search trees.

Everything returns values or raises exceptions; nothing prints.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `bubble_sort`, `insert_at`, `delete_at`, `largest`, `linear_search` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `fibonacci_series`, `gcd`, `power` |
| `dsakit.heaps` | `max_heapify`, `min_heapify`, `build_max_heap`, `build_min_heap`, `heap_sort` |
| `dsakit.graphs` | `format_matrix`, `bfs`, `dfs` over adjacency matrices |
| `dsakit.linked_list` | `Node`, `SinglyLinkedList` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflow`, `StackUnderflow` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueOverflow`, `QueueUnderflow` |
| `dsakit.trees` | `TreeNode`, `preorder`, `inorder`, `postorder`, `count_nodes`, `find_min`, `bst_insert`, `bst_search`, `bst_delete` |

## Arrays, recursion and heaps

The array and heap builders take any iterable and return a new list; the
input is left untouched. `max_heapify` and `min_heapify` work in place on a
list.

```python
from dsakit.arrays import bubble_sort, insert_at, delete_at, largest, linear_search
from dsakit.heaps import build_max_heap, heap_sort
from dsakit.recursion import factorial, fibonacci_series, gcd, power

bubble_sort([64, 34, 25, 12, 22])        # [12, 22, 25, 34, 64]
insert_at([1, 2, 4, 5], 2, 3)            # [1, 2, 3, 4, 5]
delete_at([1, 2, 99, 3, 4], 2)           # [1, 2, 3, 4]
largest([10, 50, 20, 80, 30])            # 80
linear_search([10, 20, 30, 40, 50], 30)  # 2  (None when absent)

build_max_heap([3, 9, 2, 1, 4, 5])       # [9, 4, 5, 1, 3, 2]
heap_sort([12, 11, 13, 5, 6, 7])         # [5, 6, 7, 11, 12, 13]

factorial(5)            # 120
fibonacci_series(5)     # [0, 1, 1, 2, 3]
gcd(48, 18)             # 6
power(2, 3)             # 8
```

`insert_at` and `delete_at` raise `IndexError` for a position out of range,
`largest` raises `ValueError` on empty input and `power` raises `ValueError`
for a negative exponent. `gcd` keeps the remainder's sign with the dividend,
so negative inputs can give a negative result.

## Graphs

Graphs are square adjacency matrices; an entry equal to 1 marks an edge and
neighbours are visited in index order.

```python
from dsakit.graphs import bfs, dfs, format_matrix

graph = [[0, 1, 1, 0], [1, 0, 0, 1], [1, 0, 0, 1], [0, 1, 1, 0]]
bfs(graph, 0)  # [0, 1, 2, 3]
dfs(graph, 0)  # [0, 1, 3, 2]
print(format_matrix([[0, 1, 0], [1, 0, 1], [0, 1, 0]]))
# 0 1 0
# 1 0 1
# 0 1 0
```

A matrix that is not square raises `ValueError`; a start vertex out of range
raises `IndexError`.

## Linked list, stacks and queues

```python
from dsakit.linked_list import SinglyLinkedList
from dsakit.stacks import ArrayStack, LinkedStack
from dsakit.queues import ArrayQueue, CircularQueue, LinkedQueue

items = SinglyLinkedList([20])
items.push_front(10)
items.append(30)
list(items)          # [10, 20, 30]
items.pop_front()    # 10

stack = ArrayStack(capacity=5)
stack.push(5)
stack.push(15)
stack.peek()         # 15
stack.display()      # 'Stack: 15 5'
stack.pop()          # 15

queue = CircularQueue()   # capacity 3
for value in (10, 20, 30):
    queue.enqueue(value)
queue.rear()         # 30
queue.dequeue()      # 10
```

- `ArrayStack` holds at most `capacity` items (default 10); iteration and
  `display()` go from top to bottom. `LinkedStack` is unbounded.
- `ArrayQueue` has `capacity` slots (default 5) that are not reused after a
  dequeue: once `capacity` items have been enqueued in total, further
  enqueues overflow. `CircularQueue` (default capacity 3) reuses its slots.
  `LinkedQueue` is unbounded.
- A full stack or queue raises `StackOverflow` or `QueueOverflow`. Reading
  from an empty one raises `StackUnderflow` or `QueueUnderflow`, both
  subclasses of `IndexError`. `SinglyLinkedList.pop_front` on an empty list
  raises `IndexError`.

## Trees

Trees are built from `TreeNode(data, left, right)`. The search-tree functions
take the root and return the (possibly new) root; equal values go into the
right subtree.

```python
from dsakit.trees import TreeNode, bst_insert, bst_search, bst_delete
from dsakit.trees import count_nodes, inorder, preorder, postorder

tree = TreeNode(1, TreeNode(2), TreeNode(3))
preorder(tree)      # [1, 2, 3]
inorder(tree)       # [2, 1, 3]
postorder(tree)     # [2, 3, 1]
count_nodes(tree)   # 3

root = None
for value in (50, 30, 70):
    root = bst_insert(root, value)
inorder(root)                  # [30, 50, 70]
bst_search(root, 30).data      # 30  (None when absent)
root = bst_delete(root, 50)
inorder(root)                  # [30, 70]
```

`bst_delete` replaces a node with two children by its in-order successor and
leaves the tree unchanged when the key is absent.

## What this package does not do

It is a library only: there is no command-line program, and the structures
live in memory with no persistence.