"""Builders for sample, random, chain and balanced numbered trees."""

from __future__ import annotations

import itertools
import random
import string
from typing import Iterator

from .zs_tree import ZSNode, ZSTree


def _label_cycle() -> Iterator[str]:
    return itertools.cycle(string.ascii_lowercase)


def _check_size(num_nodes: int) -> None:
    if num_nodes <= 0:
        raise ValueError("number of nodes must be greater than zero")


def sample_tree_one() -> ZSTree:
    """The tree a(b, c(d, e))."""
    a, b, c, d, e = (ZSNode(label) for label in "abcde")
    c.add_child(d)
    c.add_child(e)
    a.add_child(b)
    a.add_child(c)
    return ZSTree(a)


def sample_tree_two() -> ZSTree:
    """The tree a(b, f)."""
    a, b, f = (ZSNode(label) for label in "abf")
    a.add_child(b)
    a.add_child(f)
    return ZSTree(a)


def random_tree(num_nodes: int, seed: int) -> ZSTree:
    """A seeded random tree; each new node hangs under a random earlier one.

    Labels run through the alphabet in creation order and wrap after "z".
    """
    _check_size(num_nodes)
    rng = random.Random(seed)
    labels = _label_cycle()
    root = ZSNode(next(labels))
    pool = [root]
    for _ in range(1, num_nodes):
        node = ZSNode(next(labels))
        rng.choice(pool).add_child(node)
        pool.append(node)
    return ZSTree(root)


def chain_tree(num_nodes: int) -> ZSTree:
    """A linear chain where every node has a single child."""
    _check_size(num_nodes)
    labels = _label_cycle()
    root = ZSNode(next(labels))
    current = root
    for _ in range(1, num_nodes):
        node = ZSNode(next(labels))
        current.add_child(node)
        current = node
    return ZSTree(root)


def balanced_tree(num_nodes: int) -> ZSTree:
    """A binary tree filled level by level, left child before right."""
    _check_size(num_nodes)
    labels = _label_cycle()
    root = ZSNode(next(labels))
    level = [root]
    created = 1
    while created < num_nodes:
        next_level: list[ZSNode] = []
        for parent in level:
            for _ in range(2):
                if created >= num_nodes:
                    break
                child = ZSNode(next(labels))
                parent.add_child(child)
                next_level.append(child)
                created += 1
        level = next_level
    return ZSTree(root)