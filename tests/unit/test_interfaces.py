"""Unit tests checking components against their protocols."""

from btree_index import BTree, LoggingTracer, RecordingTracer
from btree_index.components.arena import NodeArena
from btree_index.components.ids import NodeIdGenerator
from btree_index.interfaces.arena import Arena
from btree_index.interfaces.ids import IdGenerator
from btree_index.interfaces.trace import TraceHook
from btree_index.interfaces.tree import OrderedIndex


def test_tree_is_ordered_index():
    assert isinstance(BTree.with_branching_factor(3), OrderedIndex)


def test_arena_protocol():
    assert isinstance(NodeArena(), Arena)


def test_id_generator_protocol():
    assert isinstance(NodeIdGenerator(), IdGenerator)


def test_tracers_are_trace_hooks():
    assert isinstance(RecordingTracer(), TraceHook)
    assert isinstance(LoggingTracer(), TraceHook)


def test_plain_function_as_trace_hook():
    """Test that any callable works as a tracer."""
    seen = []
    tree = BTree.with_branching_factor(3, tracer=seen.append)
    tree.insert(1, "a")

    assert isinstance(seen.append, TraceHook)
    assert len(seen) == 1
