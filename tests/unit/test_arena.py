"""Unit tests for the node arena."""

import pytest

from btree_index.components.arena import NodeArena
from btree_index.components.ids import NodeIdGenerator
from btree_index.components.nodes import InternalNode, LeafNode
from btree_index.core.errors import InvariantViolation, NodeNotFoundError, NodeVariantError


@pytest.fixture
def arena():
    """Create empty arena for tests."""
    return NodeArena()


def test_arena_allocate_returns_fresh_ids(arena):
    """Test that allocation hands out increasing ids."""
    first = arena.allocate(LeafNode())
    second = arena.allocate(LeafNode())
    third = arena.allocate(InternalNode([5], [first, second]))

    assert (first, second, third) == (0, 1, 2)
    assert len(arena) == 3


def test_arena_get_returns_same_object(arena):
    """Test that get returns the stored node for in-place mutation."""
    leaf = LeafNode()
    node_id = arena.allocate(leaf)

    arena.get(node_id).insert_entry(0, 1, "one")

    assert arena.get(node_id) is leaf
    assert leaf.keys == [1]


def test_arena_missing_id_is_invariant_violation(arena):
    """Test that an unknown id is reported as a corrupted tree."""
    with pytest.raises(NodeNotFoundError):
        arena.get(42)

    with pytest.raises(InvariantViolation):
        arena.get(42)

    with pytest.raises(RuntimeError):
        arena.get(42)


def test_arena_typed_access(arena):
    """Test leaf() and internal() accessors."""
    leaf_id = arena.allocate(LeafNode())
    internal_id = arena.allocate(InternalNode([1], [leaf_id, leaf_id]))

    assert isinstance(arena.leaf(leaf_id), LeafNode)
    assert isinstance(arena.internal(internal_id), InternalNode)

    with pytest.raises(NodeVariantError):
        arena.internal(leaf_id)
    with pytest.raises(NodeVariantError):
        arena.leaf(internal_id)


def test_arena_items_in_id_order(arena):
    """Test that items are enumerated by ascending id."""
    ids = [arena.allocate(LeafNode(keys=[i], values=[i])) for i in range(5)]

    assert [node_id for node_id, _ in arena.items()] == ids
    assert [node.keys for _, node in arena.items()] == [[i] for i in range(5)]


def test_arena_contains(arena):
    """Test membership by id."""
    node_id = arena.allocate(LeafNode())
    assert node_id in arena
    assert node_id + 1 not in arena


def test_arena_uses_given_generator():
    """Test that the arena delegates id issuing to its generator."""
    gen = NodeIdGenerator(start=100)
    arena = NodeArena(gen)

    assert arena.allocate(LeafNode()) == 100
    assert arena.allocate(LeafNode()) == 101
    assert gen.issued == 2
