"""Integration tests for the B-tree index.

Randomised workloads are checked against a plain sorted reference for:
1. Sortedness of the leaf chain
2. Completeness of lookups (with duplicate multiplicity)
3. Node capacity and child-count invariants
4. Height monotonicity
"""

import random
from collections import Counter

import pytest

from btree_index import BTree, BTreeConfig


def chain_keys(tree):
    return [key for _, leaf in tree.iter_leaves() for key in leaf.keys]


def chain_entries(tree):
    return [entry for _, leaf in tree.iter_leaves() for entry in leaf.entries()]


@pytest.mark.parametrize("branching_factor", [2, 3, 4, 5, 8, 32])
@pytest.mark.parametrize("seed", [1, 7, 42])
def test_random_workload_matches_reference(branching_factor, seed):
    """Test random distinct keys against sorted()."""
    rng = random.Random(seed)
    keys = rng.sample(range(10_000), 500)
    tree = BTree(BTreeConfig(branching_factor=branching_factor))

    for key in keys:
        tree.insert(key, f"value-{key}")

    tree.check_invariants()
    assert len(tree) == len(keys)
    assert chain_keys(tree) == sorted(keys)
    for key in keys:
        assert tree.get(key) == f"value-{key}"
    for key in rng.sample(range(10_000, 20_000), 50):
        assert tree.lookup(key) is None


@pytest.mark.parametrize("branching_factor", [2, 3, 6])
def test_duplicate_heavy_workload(branching_factor):
    """Test many duplicates drawn from a small key space."""
    rng = random.Random(branching_factor)
    tree = BTree.with_branching_factor(branching_factor)
    inserted = []

    for i in range(400):
        key = rng.randrange(20)
        tree.insert(key, i)
        inserted.append((key, i))

    tree.check_invariants()
    assert chain_keys(tree) == sorted(key for key, _ in inserted)

    expected = Counter(key for key, _ in inserted)
    for key, count in expected.items():
        values = tree.lookup_all(key)
        assert len(values) == count
        assert sorted(values) == sorted(i for k, i in inserted if k == key)
        assert tree.lookup(key) in values


@pytest.mark.parametrize("order", ["ascending", "descending"])
def test_sequential_workloads(order):
    """Test monotone insertion orders, the split-heavy edge cases."""
    keys = list(range(300))
    if order == "descending":
        keys.reverse()
    tree = BTree.with_branching_factor(4)

    heights = []
    for key in keys:
        tree.insert(key, key * 2)
        heights.append(tree.height)

    tree.check_invariants()
    assert heights == sorted(heights)
    assert chain_keys(tree) == list(range(300))
    assert all(tree.get(key) == key * 2 for key in keys)


def test_invariants_hold_after_every_insert():
    """Test capacity and child counts after each individual insert."""
    rng = random.Random(2024)
    tree = BTree.with_branching_factor(3)

    for _ in range(200):
        tree.insert(rng.randrange(100), None)
        tree.check_invariants()
        for _, node in tree.arena.items():
            assert len(node.keys) <= tree.branching_factor - 1
            if not node.is_leaf:
                assert len(node.children) == len(node.keys) + 1


def test_string_keys():
    """Test lexicographic ordering with string keys."""
    rng = random.Random(5)
    words = ["".join(rng.choice("abcdefgh") for _ in range(rng.randint(1, 6))) for _ in range(300)]
    tree = BTree.with_branching_factor(5)

    for word in words:
        tree.insert(word, word.upper())

    tree.check_invariants()
    assert chain_keys(tree) == sorted(words)
    for word in set(words):
        assert tree.lookup_all(word) == [word.upper()] * words.count(word)


def test_tuple_keys():
    """Test composite keys."""
    tree = BTree.with_branching_factor(4)
    keys = [(i % 7, i) for i in range(100)]

    for key in keys:
        tree.insert(key, key[1])

    tree.check_invariants()
    assert chain_keys(tree) == sorted(keys)
    assert tree.get((3, 10)) == 10


def test_entries_follow_keys():
    """Test that values travel with their keys through splits."""
    rng = random.Random(99)
    tree = BTree.with_branching_factor(3)
    keys = rng.sample(range(1000), 200)

    for key in keys:
        tree.insert(key, -key)

    assert chain_entries(tree) == [(key, -key) for key in sorted(keys)]


def test_stats_reflect_growth():
    """Test stats against split and growth accounting."""
    tree = BTree.with_branching_factor(8)
    for key in range(1000):
        tree.insert(key, key)

    stats = tree.stats()
    assert stats["entries"] == 1000
    assert stats["height"] >= 3
    assert stats["node_count"] == 1 + stats["leaf_splits"] + stats["internal_splits"] + stats["height"]
    assert stats["leaf_count"] == sum(1 for _ in tree.iter_leaves())
