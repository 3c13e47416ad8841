"""Performance benchmarks for the B-tree index."""

import random
import time

import pytest

from btree_index import BTree, BTreeConfig

pytestmark = pytest.mark.performance


@pytest.fixture
def benchmark_tree():
    """Create tree with a realistic branching factor."""
    return BTree(BTreeConfig(branching_factor=64))


def test_sequential_insert_performance(benchmark_tree):
    """Benchmark ascending insert throughput."""
    num_records = 20000

    start_time = time.time()
    for i in range(num_records):
        benchmark_tree.insert(i, i)
    duration = time.time() - start_time

    inserts_per_second = num_records / duration if duration > 0 else float("inf")
    print(f"\nSequential inserts: {inserts_per_second:.0f} ops/sec")
    print(f"Height: {benchmark_tree.height}, nodes: {len(benchmark_tree.arena)}")

    assert inserts_per_second > 1000


def test_random_lookup_performance(benchmark_tree):
    """Benchmark random point lookups."""
    num_records = 20000
    keys = list(range(num_records))
    random.Random(0).shuffle(keys)
    for key in keys:
        benchmark_tree.insert(key, key)

    probes = random.Random(1).choices(keys, k=10000)
    start_time = time.time()
    for key in probes:
        assert benchmark_tree.lookup(key) == key
    duration = time.time() - start_time

    lookups_per_second = len(probes) / duration if duration > 0 else float("inf")
    print(f"\nRandom lookups: {lookups_per_second:.0f} ops/sec")

    assert lookups_per_second > 1000


def test_height_stays_logarithmic(benchmark_tree):
    """Test that height grows like log_b(n)."""
    for key in range(50000):
        benchmark_tree.insert(key, None)

    assert benchmark_tree.height <= 16
