"""Rooted, ordered, labelled trees and simple tree generators."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator

EMPTY_TREE_TEXT = "[empty tree]\n"


@dataclass(eq=False)
class Node:
    """A tree node holding a label and its ordered children."""

    label: str
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append ``child`` as the last child of this node."""
        self.children.append(child)


def _flag_last(children: list[Node]) -> list[tuple[Node, bool]]:
    last = len(children) - 1
    return [(child, position == last) for position, child in enumerate(children)]


class Tree:
    """A tree given by its root node; an empty tree has no root."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    def __str__(self) -> str:
        return self.render()

    def _preorder(self) -> Iterator[tuple[Node, int]]:
        """Yield ``(node, depth)`` pairs in pre-order."""
        if self.root is None:
            return
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((child, depth + 1) for child in reversed(node.children))

    def postorder(self) -> list[Node]:
        """All nodes in post-order: children left to right, then the parent."""
        result: list[Node] = []
        if self.root is None:
            return result
        stack: list[tuple[Node, bool]] = [(self.root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                result.append(node)
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
        return result

    def depths(self) -> dict[Node, int]:
        """Map every node to its depth; the root has depth 0."""
        return dict(self._preorder())

    def subtree_sizes(self) -> dict[Node, int]:
        """Map every node to the number of nodes in its subtree, itself included."""
        sizes: dict[Node, int] = {}
        for node in self.postorder():
            sizes[node] = 1 + sum(sizes[child] for child in node.children)
        return sizes

    def depth_of(self, node: Node) -> int:
        """Depth of ``node``; raises ValueError if it is not in the tree."""
        for candidate, depth in self._preorder():
            if candidate is node:
                return depth
        raise ValueError("node is not part of this tree")

    def count(self) -> int:
        """Total number of nodes."""
        return sum(1 for _ in self._preorder())

    def is_leaf(self, node: Node | None) -> bool:
        """True if ``node`` exists and has no children."""
        return node is not None and not node.children

    def children_of(self, node: Node | None) -> list[Node]:
        """The children of ``node`` as a new list; empty for ``None``."""
        return list(node.children) if node is not None else []

    def node_at_postorder_index(self, index: int) -> Node:
        """Node at the 0-based post-order ``index``; raises IndexError if invalid."""
        nodes = self.postorder()
        if not 0 <= index < len(nodes):
            raise IndexError(f"post-order index out of range: {index}")
        return nodes[index]

    def find_by_label(self, label: str) -> Node | None:
        """First node in pre-order with ``label``, or None."""
        return next((node for node, _ in self._preorder() if node.label == label), None)

    def postorder_index(self, node: Node) -> int:
        """Post-order index of ``node``; raises ValueError if it is not in the tree."""
        for index, candidate in enumerate(self.postorder()):
            if candidate is node:
                return index
        raise ValueError("node is not part of this tree")

    def render(self) -> str:
        """Draw the tree with box-drawing connectors, one node per line."""
        if self.root is None:
            return EMPTY_TREE_TEXT
        lines = [self.root.label]
        stack = [(child, "", last) for child, last in reversed(_flag_last(self.root.children))]
        while stack:
            node, prefix, last = stack.pop()
            lines.append(prefix + ("└── " if last else "├── ") + node.label)
            child_prefix = prefix + ("    " if last else "│   ")
            stack.extend(
                (child, child_prefix, child_last)
                for child, child_last in reversed(_flag_last(node.children))
            )
        return "\n".join(lines) + "\n"


def random_tree(num_nodes: int, seed: int) -> Tree:
    """A random tree labelled "0".."n-1"; each new node hangs under a random earlier one."""
    if num_nodes <= 0:
        return Tree()
    rng = random.Random(seed)
    root = Node("0")
    pool = [root]
    for label in range(1, num_nodes):
        node = Node(str(label))
        rng.choice(pool).add_child(node)
        pool.append(node)
    return Tree(root)


def star_tree(num_nodes: int) -> Tree:
    """A root "0" with ``num_nodes - 1`` leaf children labelled "1".."n-1"."""
    if num_nodes <= 0:
        return Tree()
    root = Node("0")
    for label in range(1, num_nodes):
        root.add_child(Node(str(label)))
    return Tree(root)