"""Post-order numbered trees with leftmost leaves and keyroots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(eq=False)
class ZSNode:
    """A labelled node carrying its post-order index and leftmost-leaf index.

    ``walking_index`` is the node's post-order position and ``li`` the
    post-order position of the leftmost leaf of its subtree; both stay -1
    until the node is numbered by a :class:`ZSTree`.
    """

    label: str
    li: int = -1
    walking_index: int = -1
    children: list[ZSNode] = field(default_factory=list)

    def add_child(self, child: ZSNode) -> None:
        """Append ``child`` as the last child of this node."""
        self.children.append(child)


class ZSTree:
    """A tree numbered in post-order, with its left-right keyroots.

    ``indices`` lists the nodes in post-order; ``keyroots`` lists the root
    and every node that is not the first child of its parent, in pre-order.
    """

    def __init__(self, root: ZSNode | None = None) -> None:
        self.root = root
        self.indices: list[ZSNode] = []
        self.keyroots: list[ZSNode] = []
        if root is not None:
            self._number_postorder(root)
            self._find_keyroots(root)

    def __len__(self) -> int:
        return len(self.indices)

    def node(self, index: int) -> ZSNode:
        """Node at post-order ``index``; raises IndexError when out of range."""
        if not 0 <= index < len(self.indices):
            raise IndexError(f"index out of bounds: {index}")
        return self.indices[index]

    def _number_postorder(self, root: ZSNode) -> None:
        counter = 0
        stack: list[tuple[ZSNode, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
                continue
            node.walking_index = counter
            counter += 1
            node.li = node.children[0].li if node.children else node.walking_index
            self.indices.append(node)

    def _find_keyroots(self, root: ZSNode) -> None:
        last_li = -1
        stack = [root]
        while stack:
            node = stack.pop()
            if node.li != last_li:
                self.keyroots.append(node)
                last_li = node.li
            stack.extend(reversed(node.children))


def _describe(node: ZSNode) -> str:
    return f"Node: {node.label}, walking_index: {node.walking_index}, li: {node.li}"


def format_nodes(nodes: Iterable[ZSNode], title: str) -> str:
    """A title line followed by one line per node with its indices."""
    lines = [title, *(_describe(node) for node in nodes)]
    return "\n".join(lines) + "\n"


def format_keyroots(keyroots: Iterable[ZSNode | None], title: str) -> str:
    """Like :func:`format_nodes`, skipping missing entries."""
    return format_nodes((node for node in keyroots if node is not None), title)