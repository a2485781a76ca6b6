"""Zhang-Shasha computation that reports every step it takes."""

from __future__ import annotations

import sys
from typing import TextIO

from .zhang_shasha import TreeEditing, format_matrix, interval
from .zs_tree import ZSTree, format_keyroots

_SEPARATOR = "=============================================="


class TracingTreeEditing(TreeEditing):
    """A :class:`TreeEditing` that writes a trace of its work to ``out``.

    The trace lists the keyroots, every forest matrix before and after it
    is filled, each cell decision and the final tree distance matrix.
    Standard output is used when no stream is given.
    """

    def __init__(
        self,
        tree1: ZSTree,
        tree2: ZSTree,
        *,
        out: TextIO | None = None,
        remove_cost: int = 1,
        add_cost: int = 1,
        rename_cost: int = 1,
    ) -> None:
        super().__init__(
            tree1,
            tree2,
            remove_cost=remove_cost,
            add_cost=add_cost,
            rename_cost=rename_cost,
        )
        self._out = out

    def _write(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(text)

    def _emit(self, line: str = "") -> None:
        self._write(line + "\n")

    def compute_tree_distance(self, index1: int, index2: int) -> int:
        """Fill the forest matrix for one subtree pair, tracing each cell."""
        n1 = self._node1(index1)
        n2 = self._node2(index2)
        self._emit(f"Computing distance between subtrees rooted at {n1.label} and {n2.label}")
        li, lj = n1.li, n2.li
        self._emit(f"Left-most leaf index for {n1.label}: {li}")
        self._emit(f"Left-most leaf index for {n2.label}: {lj}")
        rows = interval(li, index1)
        cols = interval(lj, index2)
        self._emit(f"Forest 1 size: {rows}")
        self._emit(f"Forest 2 size: {cols}")

        forest = self._zero_matrix(rows, cols)
        for di in range(1, rows + 1):
            forest[di][0] = forest[di - 1][0] + self.remove_cost
        for dj in range(1, cols + 1):
            forest[0][dj] = forest[0][dj - 1] + self.add_cost
        self.forest_dist = forest

        subnodes1 = [self._node1(i) for i in range(li, index1 + 1)]
        subnodes2 = [self._node2(j) for j in range(lj, index2 + 1)]
        self._emit("Initial forest_dist matrix:")
        self._write(format_matrix(forest, subnodes1, subnodes2, "Forest Distance (Initial)"))

        for di in range(1, rows + 1):
            ni = self._node1(li + di - 1)
            for dj in range(1, cols + 1):
                nj = self._node2(lj + dj - 1)
                deletion = forest[di - 1][dj] + self.remove_cost
                insertion = forest[di][dj - 1] + self.add_cost
                ti, tj = ni.walking_index + 1, nj.walking_index + 1
                if ni.li == li and nj.li == lj:
                    update = 0 if ni.label == nj.label else self.rename_cost
                    substitution = forest[di - 1][dj - 1] + update
                    forest[di][dj] = min(deletion, insertion, substitution)
                    self.tree_dist[ti][tj] = forest[di][dj]
                    self._emit(f"Nodes {ni.label} and {nj.label} are left-most leaves.")
                    self._emit(f"Update cost: {update}")
                    self._emit(
                        f"Costs: del={deletion}, ins={insertion}, upd={substitution}"
                    )
                else:
                    subtree = forest[ni.li - li][nj.li - lj] + self.tree_dist[ti][tj]
                    forest[di][dj] = min(deletion, insertion, subtree)
                    self._emit(
                        f"Nodes {ni.label} and {nj.label} are not both left-most leaves."
                    )
                    self._emit(f"Using tree_dist[{ti}][{tj}] = {self.tree_dist[ti][tj]}")
                self._emit(f"forest_dist[{di}][{dj}] = {forest[di][dj]}")

        self._emit("Final forest_dist matrix:")
        self._write(format_matrix(forest, subnodes1, subnodes2, "Forest Distance (Final)"))
        return forest[rows][cols]

    def tree_edit_distance(self) -> int:
        """Edit distance between the two whole trees, tracing every keyroot pair."""
        self.nodes1 = list(self.tree1.indices)
        self.nodes2 = list(self.tree2.indices)
        size1, size2 = len(self.nodes1), len(self.nodes2)
        keyroots1 = list(reversed(self.tree1.keyroots))
        keyroots2 = list(reversed(self.tree2.keyroots))
        self._write(format_keyroots(keyroots1, "\nTree 1 Keyroots:"))
        self._write(format_keyroots(keyroots2, "\nTree 2 Keyroots:"))

        self.tree_dist = self._zero_matrix(size1, size2)
        for i in range(1, size1 + 1):
            self.tree_dist[i][0] = self.tree_dist[i - 1][0] + self.remove_cost
        for j in range(1, size2 + 1):
            self.tree_dist[0][j] = self.tree_dist[0][j - 1] + self.add_cost

        for keyroot1 in keyroots1:
            for keyroot2 in keyroots2:
                i, j = keyroot1.walking_index, keyroot2.walking_index
                self._emit()
                self._emit(_SEPARATOR)
                self._emit(
                    f"Computing distance between keyroots {keyroot1.label} (index {i}) "
                    f"and {keyroot2.label} (index {j})"
                )
                distance = self.compute_tree_distance(i, j)
                self._emit(f"Computed distance: {distance}")
                self._emit(_SEPARATOR)

        self._emit()
        self._emit("Final tree distance matrix:")
        self._write(format_matrix(self.tree_dist, self.nodes1, self.nodes2, "Tree Distance"))
        return self.tree_dist[size1][size2]