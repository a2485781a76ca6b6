"""Zhang-Shasha tree edit distance over post-order numbered trees."""

from __future__ import annotations

from typing import Sequence

from .zs_tree import ZSNode, ZSTree

_CELL = 8


def interval(li: int, i: int) -> int:
    """Number of post-order positions from ``li`` to ``i`` inclusive; 0 if empty."""
    return i - li + 1 if i >= li else 0


def _cell(value: object) -> str:
    return f"{value!s:>{_CELL}}"


def format_matrix(
    matrix: Sequence[Sequence[int]],
    nodes1: Sequence[ZSNode],
    nodes2: Sequence[ZSNode],
    title: str,
) -> str:
    """Render a distance matrix with node labels on its rows and columns."""
    header = " " * _CELL + _cell("∅") + "".join(_cell(node.label) for node in nodes2)
    width = len(nodes2) + 1
    rows = [_cell("∅") + "".join(_cell(value) for value in matrix[0][:width])]
    rows.extend(
        _cell(node.label) + "".join(_cell(value) for value in matrix[i][:width])
        for i, node in enumerate(nodes1, 1)
    )
    dashes = "-" * (_CELL * (len(nodes2) + 2))
    return "\n" + title + ":\n" + "\n".join([header, dashes, *rows]) + "\n\n"


class TreeEditing:
    """Zhang-Shasha edit distance between two numbered trees.

    ``tree_dist[i + 1][j + 1]`` holds the distance between the subtrees
    rooted at post-order nodes ``i`` and ``j`` once they are computed;
    row and column 0 stand for the empty tree.
    """

    def __init__(
        self,
        tree1: ZSTree,
        tree2: ZSTree,
        *,
        remove_cost: int = 1,
        add_cost: int = 1,
        rename_cost: int = 1,
    ) -> None:
        self.tree1 = tree1
        self.tree2 = tree2
        self.remove_cost = remove_cost
        self.add_cost = add_cost
        self.rename_cost = rename_cost
        self.nodes1: list[ZSNode] = list(tree1.indices)
        self.nodes2: list[ZSNode] = list(tree2.indices)
        self.tree_dist = self._zero_matrix(len(self.nodes1), len(self.nodes2))
        self.forest_dist = self._zero_matrix(len(self.nodes1), len(self.nodes2))

    @staticmethod
    def _zero_matrix(rows: int, cols: int) -> list[list[int]]:
        return [[0] * (cols + 1) for _ in range(rows + 1)]

    def _node1(self, index: int) -> ZSNode:
        if not 0 <= index < len(self.nodes1):
            raise IndexError(f"index out of bounds for nodes1: {index}")
        return self.nodes1[index]

    def _node2(self, index: int) -> ZSNode:
        if not 0 <= index < len(self.nodes2):
            raise IndexError(f"index out of bounds for nodes2: {index}")
        return self.nodes2[index]

    def compute_tree_distance(self, index1: int, index2: int) -> int:
        """Fill the forest matrix for the subtrees at ``index1`` and ``index2``.

        Updates ``tree_dist`` for every pair on the two leftmost paths and
        returns the distance between the two subtrees.
        """
        li = self._node1(index1).li
        lj = self._node2(index2).li
        rows = interval(li, index1)
        cols = interval(lj, index2)

        forest = self._zero_matrix(rows, cols)
        for di in range(1, rows + 1):
            forest[di][0] = forest[di - 1][0] + self.remove_cost
        for dj in range(1, cols + 1):
            forest[0][dj] = forest[0][dj - 1] + self.add_cost
        self.forest_dist = forest

        for di in range(1, rows + 1):
            ni = self._node1(li + di - 1)
            for dj in range(1, cols + 1):
                nj = self._node2(lj + dj - 1)
                deletion = forest[di - 1][dj] + self.remove_cost
                insertion = forest[di][dj - 1] + self.add_cost
                ti, tj = ni.walking_index + 1, nj.walking_index + 1
                if ni.li == li and nj.li == lj:
                    update = 0 if ni.label == nj.label else self.rename_cost
                    forest[di][dj] = min(deletion, insertion, forest[di - 1][dj - 1] + update)
                    self.tree_dist[ti][tj] = forest[di][dj]
                else:
                    subtree = forest[ni.li - li][nj.li - lj] + self.tree_dist[ti][tj]
                    forest[di][dj] = min(deletion, insertion, subtree)
        return forest[rows][cols]

    def tree_edit_distance(self) -> int:
        """Edit distance between the two whole trees."""
        self.nodes1 = list(self.tree1.indices)
        self.nodes2 = list(self.tree2.indices)
        size1, size2 = len(self.nodes1), len(self.nodes2)
        self.tree_dist = self._zero_matrix(size1, size2)
        for i in range(1, size1 + 1):
            self.tree_dist[i][0] = self.tree_dist[i - 1][0] + self.remove_cost
        for j in range(1, size2 + 1):
            self.tree_dist[0][j] = self.tree_dist[0][j - 1] + self.add_cost

        for keyroot1 in reversed(self.tree1.keyroots):
            for keyroot2 in reversed(self.tree2.keyroots):
                self.compute_tree_distance(keyroot1.walking_index, keyroot2.walking_index)
        return self.tree_dist[size1][size2]


def zhang_shasha_distance(tree1: ZSTree, tree2: ZSTree) -> int:
    """Zhang-Shasha edit distance with unit costs."""
    return TreeEditing(tree1, tree2).tree_edit_distance()