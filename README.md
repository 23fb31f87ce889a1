# dsakit

A small collection of classic data structures and algorithms, written as
plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.graph` | `adjacency_lines`, `bfs`, `dfs`, `count_components`, `has_cycle`, `topological_sort`, and friend-group analysis (`friend_groups`, `format_friend_groups`) |
| `dsakit.stacks` | `BoundedStack`, `LinkedStack`, `ListStack`, and queues built from nodes or stacks: `LinkedQueue`, `TwoStackQueue`, `CostlyEnqueueQueue` |
| `dsakit.expressions` | bracket checking (`is_valid_expression`, `is_valid_brackets`, `is_matching_pair`), `precedence`, `is_right_associative`, `infix_to_postfix`, `evaluate_postfix` |
| `dsakit.bst` | `ListBST`, a key/value binary search tree with default, in-order, pre-order and post-order renderings |
| `dsakit.bst_cli` | `run_commands`, which drives a `ListBST` from single-letter commands |
| `dsakit.auction` | an `Auction` that tracks bids on `Item`s, with current bids mirrored in a `ListBST`, and `run_script` |
| `dsakit.heap` | `MinHeap` with decrease-key, delete-key, heapify, replace-min and sorted output, and `run_commands` for numbered heap commands |

## Installing

```
pip install dsakit
```

For running the test suite:

```
pip install "dsakit[test]"
pytest
```

## Examples

```python
from dsakit.expressions import infix_to_postfix, evaluate_postfix, is_valid_expression

infix_to_postfix("a*(b+c)/d")        # "abc+*d/"
evaluate_postfix("512+4*+")          # 17
evaluate_postfix("34-")              # 1  (the top of the stack is the left operand)
is_valid_expression("{[()]}")        # True
is_valid_expression("[{(})]")        # False
```

`evaluate_postfix` works on single-digit operands and truncates division
toward zero.

```python
from dsakit.graph import bfs, dfs, has_cycle

graph = {1: [2, 3], 2: [1, 4], 3: [1], 4: [2]}
bfs(graph, 1)         # [1, 2, 3, 4]
dfs(graph, 1)         # [1, 2, 4, 3]
has_cycle(graph)      # False
```

```python
from dsakit.heap import MinHeap

heap = MinHeap()
heap.heapify([5, 3, 8, 1])
heap.find_min()       # 1
heap.extract_min()    # 1
heap.is_valid()       # True
```

```python
from dsakit.bst import ListBST

tree = ListBST()
tree.insert(8, 8)
tree.insert(3, 3)
tree.insert(10, 10)
tree.find(3)          # True
tree.find_min()       # 3
tree.find_max()       # 10
tree.render("I")      # "(3:3) (8:8) (10:10) "
```

Operations on empty structures raise exceptions rather than returning
sentinel values: `StackUnderflowError` and `StackOverflowError` for the
stacks, `IndexError` for the stack-based queues, `HeapUnderflowError` and
`HeapOverflowError` for the heap, and `KeyError` or `ValueError` for the
search tree.

## Command-line tools

```
dsakit-friends [FILE]           # friend groups and missing friendships (default FILE: in.txt)
dsakit-bst FILE                 # run search-tree commands
dsakit-auction FILE             # run an auction script
dsakit-heap [INPUT [OUTPUT]]    # run heap commands (defaults: input.txt, output.txt)
```

- `dsakit-friends` reads the number of people, the number of pairs and then
  the pairs, and prints each connected group with the pairs inside it that
  are not directly linked, followed by the number of groups.
- `dsakit-bst` takes commands `I k` (insert), `D k` (delete), `F k` (find),
  `E` (empty?), `S` (size), `M Min` / `M Max`, and `T In` / `T Pre` / `T Post`.
- `dsakit-auction` reads a count of items with their names and starting
  bids, then `BID name amount`, `CHECK name`, `STATS name`, `ADD name start`
  and `REPORT` commands.
- `dsakit-heap` reads numbered commands, one per line (1 insert, 2 extract
  min, 3 find min, 4 size, 5 empty?, 6 delete key, 7 decrease key, 8 print,
  9 validate, 10 heapify, 11 sorted, 12 replace min), and writes the report
  to the output file.

## What it does not include

There is no resizing circular-array queue with front and back access, and no
list type with a movable cursor; the queues provided are `LinkedQueue`,
`TwoStackQueue` and `CostlyEnqueueQueue` in `dsakit.stacks`.