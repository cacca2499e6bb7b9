# algoshelf

Classic algorithms and data structures in plain Python, using only the
standard library.

## Installation

```
pip install algoshelf
```

To run the test suite:

```
pip install "algoshelf[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algoshelf.backtracking` | `graph_colorings`, `knight_tour`, `minimax`, `n_queens`, `format_board`, `solve_rat_maze`, `is_possible`, `solve_sudoku`, `format_sudoku` |
| `algoshelf.numerics` | `gaussian_elimination` (returns an `EliminationResult` with `matrix` and `solution`), `false_position` |
| `algoshelf.avl_tree` | `AVLTree` |
| `algoshelf.binary_heap` | `MinHeap`, `HeapOverflowError` |
| `algoshelf.binary_tree` | `BinaryTree` |
| `algoshelf.trie` | `Trie` |
| `algoshelf.disjoint_set` | `DisjointSet` |
| `algoshelf.linked_list` | `LinkedList`, `ArrayLinkedList` |
| `algoshelf.circular_list` | `CircularList` |
| `algoshelf.queues` | `LinkedQueue`, `ArrayQueue`, `CircularQueue`, `QueueEmptyError`, `QueueFullError` |
| `algoshelf.stack` | `Stack`, `StackEmptyError`, `highest_gpa_students`, `read_student_records`, `main` |
| `algoshelf.dynamic_programming` | `catalan_numbers`, `min_coins`, `egg_drop`, `fibonacci`, `fibonacci_memo`, `matrix_chain_cost`, `is_armstrong`, `max_subarray_sum`, `longest_common_substring`, `tree_height` |
| `algoshelf.shortest_paths` | `bellman_ford`, `floyd_warshall`, `dijkstra`, `dijkstra_dense`, `NegativeCycleError` |
| `algoshelf.traversal` | `bfs`, `dfs`, `dfs_iterative`, `topological_sort`, `count_strongly_connected` |
| `algoshelf.spanning_tree` | `kruskal` |
| `algoshelf.lca` | `LowestCommonAncestor` |
| `algoshelf.greedy` | `Item`, `fractional_knapsack`, `huffman_codes` |

## Notes on behaviour

- `graph_colorings` and `n_queens` are generators yielding every solution;
  `knight_tour`, `solve_rat_maze` and `solve_sudoku` return one solution or
  `None`.
- `AVLTree` rebalances on insertion only; `delete` removes a key as in a
  plain search tree.
- `MinHeap(capacity)` raises `HeapOverflowError` when full and `IndexError`
  when empty.
- `Trie` accepts only the letters `a` to `z`.
- `ArrayQueue` does not reuse slots freed at the front until it empties;
  `ArrayLinkedList` keeps its nodes in a fixed pool and raises
  `OverflowError` when the pool runs out.
- `DisjointSet(size)` covers the elements `0` to `size`.
- `bellman_ford` and `floyd_warshall` use vertices `0..n-1`; `dijkstra`
  uses nodes `1..n`, undirected unless `directed=True`, and returns a dict;
  `dijkstra_dense` takes a weight matrix where `0` means no edge.
  Unreachable vertices get `math.inf`.
- `kruskal(node_count, edges)` returns the total cost of a minimum spanning
  forest over nodes `0..node_count`.
- `LowestCommonAncestor(node_count, edges)` works on a tree of nodes
  `1..node_count` rooted at node 1, with `query(u, v)` and `level(node)`.
- `fractional_knapsack` returns the total profit and the `(weight, profit)`
  taken from each item; `huffman_codes` returns a dict of symbol to code.

## Examples

```python
from algoshelf.dynamic_programming import fibonacci, matrix_chain_cost, min_coins
from algoshelf.disjoint_set import DisjointSet
from algoshelf.stack import Stack

fibonacci(10)                       # 55
matrix_chain_cost([10, 30, 5, 60])  # 4500
min_coins([1, 2, 3, 4], 15)         # 4

sets = DisjointSet(100)
sets.connected(1, 2)                # False
sets.union(1, 2)                    # True
sets.connected(1, 2)                # True

stack = Stack()
for value in (10, 20, 30, 40):
    stack.push(value)
stack.top()                         # 40
len(stack)                          # 4
```

## Command line

One command is installed. It reads a file of whitespace-separated pairs,
each a GPA followed by a name, and prints the highest GPA to two decimal
places and the names of every student who reached it, the last one read
first:

```
algoshelf-gpa students.txt
```

Example input:

```
3.4 Alice
3.9 Bob
3.9 Carol
2.8 Dave
```

Reading stops at the first pair whose GPA is not a number.

## What it does not do

Apart from the GPA report, the package is a library: it has no interactive
menus or prompts for building trees, lists, queues or graphs, and nothing is
stored between runs. Build the structures and call the functions from your
own code.