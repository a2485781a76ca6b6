# treedist

Tree edit distance for ordered, labelled trees, computed two ways:

- **Selkow** (`treedist.selkow`): nodes below a pair of matched nodes are
  matched, inserted or deleted as whole subtrees. Labels are strings and
  the cost of a relabel is the rename weight times the Levenshtein
  distance between the two labels.
- **Zhang-Shasha** (`treedist.zhang_shasha`): the keyroot-based dynamic
  programme, with costs for removing, adding and renaming single nodes
  (1 each by default).

Both come with tree generators and benchmark runners that time the
algorithms on random and structured trees and write the results to CSV.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Selkow distance

```python
from treedist.tree import Node, Tree, random_tree, star_tree
from treedist.costs import CostModel, levenshtein
from treedist.selkow import SelkowDistance, selkow_distance

root = Node("A")
b = Node("B")
b.add_child(Node("E"))
b.add_child(Node("F"))
root.add_child(b)
root.add_child(Node("C"))
tree1 = Tree(root)

tree2 = random_tree(6, 42)

print(tree1.render())
print([node.label for node in tree1.postorder()])   # ['E', 'F', 'B', 'C', 'A']
print(tree1.count())                                 # 5

print(selkow_distance(tree1, tree2, CostModel()))
print(levenshtein("kitten", "sitting"))              # 3
```

`treedist.tree` provides:

- `Node(label)` with `add_child(child)`.
- `Tree(root)` (an empty tree when `root` is `None`) with `postorder()`,
  `depths()`, `subtree_sizes()`, `depth_of(node)`, `count()`,
  `is_leaf(node)`, `children_of(node)`, `node_at_postorder_index(index)`,
  `find_by_label(label)`, `postorder_index(node)` and `render()`, which
  draws the tree with box-drawing branches (`str(tree)` gives the same).
  `depth_of` and `postorder_index` raise `ValueError` for a node outside
  the tree; `node_at_postorder_index` raises `IndexError` for a bad index.
- `random_tree(n, seed)`: a reproducible random tree labelled `"0"` …
  `"n-1"`, each new node placed under a randomly chosen earlier one.
- `star_tree(n)`: a root `"0"` with `n - 1` leaf children.
  Both return an empty tree when `n <= 0`.

`treedist.costs.CostModel(insert=1.0, delete=1.0, rename=1.0)` gives
single-node costs (`insert_cost`, `delete_cost`), relabel costs
(`rename_cost`) and whole-subtree costs (`insert_subtree_cost`,
`delete_subtree_cost`). Subtree and relabel costs are memoised; call
`clear_cache()` after changing a tree that has already been costed.

`SelkowDistance(tree1, tree2, costs=None)` computes the distance on
construction. Its `cost` attribute holds the distance and `space_bytes`
the total size of all cost matrices it built, counted as 8-byte floats.
`details()` returns an account of the root comparison and
`explanation()` a description of the matrix scheme with the final cost.
`selkow_distance(tree1, tree2, costs=None)` returns just the cost.

## Zhang-Shasha distance

```python
from treedist.zs_generators import sample_tree_one, sample_tree_two, chain_tree, balanced_tree
from treedist.zhang_shasha import TreeEditing, zhang_shasha_distance

print(zhang_shasha_distance(sample_tree_one(), sample_tree_two()))
print(zhang_shasha_distance(chain_tree(50), balanced_tree(50)))

editing = TreeEditing(sample_tree_one(), sample_tree_two(), rename_cost=2)
print(editing.tree_edit_distance())
```

`treedist.zs_tree.ZSTree(root)` numbers a tree of `ZSNode`s in
post-order on construction: each node gets its `walking_index` and the
index `li` of its leftmost leaf, `indices` lists the nodes in post-order
and `keyroots` holds the keyroots. `node(index)` raises `IndexError` when
out of range. `format_nodes` and `format_keyroots` return text listings
of nodes with their indices.

`treedist.zs_generators` builds `sample_tree_one()` (a(b, c(d, e))),
`sample_tree_two()` (a(b, f)), `random_tree(n, seed)`, `chain_tree(n)`
and `balanced_tree(n)`. Generated labels run through `a` … `z` and wrap;
the generators raise `ValueError` when `n <= 0`.

`TreeEditing` keeps the `tree_dist` and `forest_dist` matrices, and
`format_matrix` renders a matrix with node labels on its rows and
columns. `treedist.zs_trace.TracingTreeEditing` runs the same
computation and writes a trace of every keyroot pair, forest matrix and
cell decision to the stream given as `out` (standard output by default).

## Benchmarks

Two commands run the benchmark suites and print a summary:

```
treedist-selkow-bench
treedist-zs-bench
```

`treedist-selkow-bench` compares pairs of random trees and pairs of star
trees, reporting time, matrix space and cost, and writes
`resultados_selkow.csv` and `resultados_selkow_completas.csv`. Options:
`--sizes` (default `10 100 1000 10000`) and `--output-dir` (default the
current directory).

`treedist-zs-bench` runs random-tree tests, then linear chain and
balanced tree tests, writing `RAND_complexity_results.csv` and
`BW_complexity_results.csv`. Options: `--random-sizes` (default
`10 100 1000 10000`), `--shape-sizes` (default `10000`) and
`--output-dir`.

The largest sizes take a long time in pure Python. The runner functions
can also be called directly: `run_random`, `run_star`, `write_csv` and
`format_summary` in `treedist.selkow_bench`; `run_random_test`,
`run_chain_test`, `run_balanced_test`, `write_csv`, `random_tests` and
`best_worst_case_tests` in `treedist.zs_bench`.

## What it does not do

Trees are built in code or by the generators; there is no reader for
trees stored in files, and no command that computes the distance between
two trees you supply. The commands only run the benchmarks. Neither
algorithm reports the sequence of edit operations, only its cost.