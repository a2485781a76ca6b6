import string

import pytest

from treedist.zs_generators import (
    balanced_tree,
    chain_tree,
    random_tree,
    sample_tree_one,
    sample_tree_two,
)


def _shape(tree):
    return [(node.label, node.li, len(node.children)) for node in tree.indices]


def test_sample_tree_one():
    tree = sample_tree_one()
    assert tree.root.label == "a"
    assert sorted(node.label for node in tree.indices) == list("abcde")


def test_sample_tree_two():
    tree = sample_tree_two()
    assert [child.label for child in tree.root.children] == ["b", "f"]
    assert sorted(node.label for node in tree.indices) == list("abf")


@pytest.mark.parametrize("size", [1, 7, 40])
def test_random_tree_size(size):
    assert len(random_tree(size, 3)) == size


def test_random_tree_is_deterministic():
    first = _shape(random_tree(30, 42))
    second = _shape(random_tree(30, 42))
    assert first == second
    assert len(first) == 30
    assert first[0][1] == 0
    assert first[-1][0] == "a"
    assert sum(children for _, _, children in first) == 29


def test_random_tree_labels_cycle_alphabet():
    tree = random_tree(26, 5)
    labels = [node.label for node in tree.indices]
    assert tree.root.label == "a"
    assert sorted(labels) == list(string.ascii_lowercase)


@pytest.mark.parametrize("build", [lambda n: random_tree(n, 1), chain_tree, balanced_tree])
@pytest.mark.parametrize("size", [0, -3])
def test_generators_reject_non_positive_size(build, size):
    with pytest.raises(ValueError):
        build(size)


def test_chain_tree_structure():
    tree = chain_tree(10)
    assert all(len(node.children) <= 1 for node in tree.indices)
    assert tree.root.li == 0
    assert len(tree.keyroots) == 1
    assert tree.root.children[0].label == "b"


def test_long_chain_builds():
    tree = chain_tree(3000)
    assert len(tree) == 3000
    assert tree.indices[-1] is tree.root


@pytest.mark.parametrize("size", [1, 2, 7, 20])
def test_balanced_tree_structure(size):
    tree = balanced_tree(size)
    assert len(tree) == size
    assert all(len(node.children) <= 2 for node in tree.indices)


def test_balanced_tree_fills_left_first():
    tree = balanced_tree(4)
    left, right = tree.root.children
    assert len(left.children) == 1
    assert right.children == []