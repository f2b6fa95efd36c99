# redblack

A red-black tree of integers. The tree rebalances itself after every
insertion. It can list its contents in infix, prefix and postfix order and
shows each node's colour.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the tree

Everything is in `redblack.tree`.

```python
from redblack.tree import RedBlackTree, EmptyTreeError

tree = RedBlackTree()
for value in (30, 15, 10):
    tree.insert(value)

tree.to_prefix_string()   # ' B15  R10  R30 '
tree.to_infix_string()    # ' R10 B15 R30'
tree.to_postfix_string()  # 'R10 R30 B15 '

len(tree)                 # 3
15 in tree                # True
tree.contains(99)         # False
list(tree)                # [10, 15, 30]
tree.get_min()            # 10
tree.get_max()            # 30
```

You can create a tree with a single value. That value becomes the black root:

```python
RedBlackTree(15).to_prefix_string()  # ' B15 '
```

`copy()` makes an independent copy with the same shape and colours, and
`copy.copy(tree)` does the same. Later insertions into one tree do not change
the other:

```python
clone = tree.copy()
tree.insert(200)
clone.contains(200)       # False
```

Duplicate values are allowed. They go into the right subtree. Iteration
returns values in ascending order.

`in` accepts any object. It returns `False` for anything that is not an `int`.

Calling `get_min()` or `get_max()` on an empty tree raises `EmptyTreeError`,
which is a subclass of `RuntimeError`.

## Traversal strings

Each node appears as `B` (black) or `R` (red) followed by its value. The
spacing differs between the three forms:

- `to_infix_string()` goes left, node, right and writes each node as `" B<n>"`.
- `to_prefix_string()` goes node, left, right and writes each node as `" B<n> "`.
- `to_postfix_string()` goes left, right, node and writes each node as `"B<n> "`.

An empty tree gives an empty string in all three forms. The `Color` enum
names the colours. `RBTNode` is the node type.

## What it does not do

The tree supports insertion and lookup only. You cannot remove values from
it, and it does not provide a command-line tool.