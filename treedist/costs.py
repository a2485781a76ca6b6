"""Edit-operation costs for tree edit distance."""

from __future__ import annotations

from typing import Callable

from .tree import Node


def levenshtein(s1: str, s2: str) -> int:
    """Classic edit distance between two strings with unit costs."""
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (c1 != c2),
                )
            )
        previous = current
    return previous[-1]


class CostModel:
    """Insertion, deletion and relabel costs, with memoised subtree totals.

    Subtree costs are cached per node; call :meth:`clear_cache` after
    changing a tree that has already been costed.
    """

    def __init__(self, insert: float = 1.0, delete: float = 1.0, rename: float = 1.0) -> None:
        self.insert = insert
        self.delete = delete
        self.rename = rename
        self._insert_cache: dict[Node, float] = {}
        self._delete_cache: dict[Node, float] = {}
        self._rename_cache: dict[tuple[str, str], float] = {}

    def insert_cost(self, node: Node | None) -> float:
        """Cost of inserting a single node."""
        return 0.0 if node is None else self.insert

    def delete_cost(self, node: Node | None) -> float:
        """Cost of deleting a single node."""
        return 0.0 if node is None else self.delete

    def rename_cost(self, source: str, target: str) -> float:
        """Relabel cost: zero for equal labels, else the rename weight times their edit distance."""
        if source == target:
            return 0.0
        key = (source, target)
        if key not in self._rename_cache:
            self._rename_cache[key] = self.rename * levenshtein(source, target)
        return self._rename_cache[key]

    def insert_subtree_cost(self, node: Node | None) -> float:
        """Cost of inserting ``node`` with its whole subtree."""
        return self._subtree_cost(node, self.insert_cost, self._insert_cache)

    def delete_subtree_cost(self, node: Node | None) -> float:
        """Cost of deleting ``node`` with its whole subtree."""
        return self._subtree_cost(node, self.delete_cost, self._delete_cache)

    def clear_cache(self) -> None:
        """Forget every memoised cost."""
        self._insert_cache.clear()
        self._delete_cache.clear()
        self._rename_cache.clear()

    @staticmethod
    def _subtree_cost(
        node: Node | None,
        unit: Callable[[Node], float],
        cache: dict[Node, float],
    ) -> float:
        if node is None:
            return 0.0
        if node in cache:
            return cache[node]
        stack: list[tuple[Node, bool]] = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if current in cache:
                continue
            if expanded:
                cache[current] = unit(current) + sum(cache[c] for c in current.children)
            else:
                stack.append((current, True))
                stack.extend((c, False) for c in current.children if c not in cache)
        return cache[node]