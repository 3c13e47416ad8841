"""B-tree engine implementation - main public API.

Orchestrates the node arena, routing helpers and trace hooks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import BTreeConfig
from .errors import InvalidBranchingFactorError, InvariantViolation, KeyNotFoundError
from .types import Key, NodeId, Promotion, TreeStats, Value
from ..components.arena import NodeArena
from ..components.nodes import InternalNode, LeafNode
from ..components.render import render_tree
from ..components.search import is_sorted, key_location, route
from ..components.trace import LoggingTracer, TraceEvent, TraceKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..interfaces.trace import TraceHook

logger = logging.getLogger(__name__)

_MISSING = object()


class BTree:
    """In-memory B-tree mapping ordered keys to values.

    Args:
        config: Tree configuration (defaults to BTreeConfig())
        tracer: Optional hook called with a TraceEvent on every descent
            step and structural change during insertion

    Public API:
        - insert(key, value): Add an entry; duplicates accumulate
        - lookup(key, default): First value stored for key, or default
        - get(key): Like lookup but raises KeyNotFoundError
        - lookup_all(key): Every value stored for key

    Invariants:
        - Every node holds at most branching_factor - 1 keys between calls
        - Internal nodes have exactly len(keys) + 1 children
        - Leaves, followed through next_leaf, yield keys in ascending order
        - All leaves are at the same depth; height only grows
    """

    def __init__(self, config: BTreeConfig | None = None, *, tracer: TraceHook | None = None):
        self.config = config if config is not None else BTreeConfig()
        self._branching_factor = self._validate_branching_factor(self.config.branching_factor)

        if tracer is None and self.config.log_trace:
            tracer = LoggingTracer()
        self._tracer = tracer

        self._arena = NodeArena()
        self._root_id = self._arena.allocate(LeafNode())
        self._height = 0
        self._size = 0
        self._leaf_splits = 0
        self._internal_splits = 0

        logger.info(f"Initialized B-tree with branching factor {self._branching_factor}")

    @classmethod
    def with_branching_factor(cls, branching_factor: int, *, tracer: TraceHook | None = None) -> BTree:
        """Build an empty tree with the given branching factor."""
        return cls(BTreeConfig(branching_factor=branching_factor), tracer=tracer)

    @staticmethod
    def _validate_branching_factor(branching_factor: int) -> int:
        if isinstance(branching_factor, bool) or not isinstance(branching_factor, int):
            raise InvalidBranchingFactorError(
                f"branching_factor must be an int, got {type(branching_factor).__name__}"
            )
        if branching_factor < 2:
            raise InvalidBranchingFactorError(
                f"branching_factor must be >= 2, got {branching_factor}"
            )
        return branching_factor

    # Properties

    @property
    def branching_factor(self) -> int:
        return self._branching_factor

    @property
    def root_id(self) -> NodeId:
        return self._root_id

    @property
    def height(self) -> int:
        """Number of edges from the root to any leaf."""
        return self._height

    @property
    def arena(self) -> NodeArena:
        return self._arena

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Key) -> bool:
        return self._locate(key) is not None

    def __repr__(self) -> str:
        return (
            f"BTree(branching_factor={self._branching_factor}, entries={self._size}, "
            f"height={self._height}, root={self._root_id})"
        )

    # Insertion

    def insert(self, key: Key, value: Value) -> None:
        """Insert key with value. Existing entries for key are kept."""
        promotion = self._insert_rec(self._root_id, key, value)
        self._size += 1
        if promotion is not None:
            self._grow_root(promotion)

    def _insert_rec(self, node_id: NodeId, key: Key, value: Value) -> Promotion | None:
        """Insert below node_id; return a promotion if node_id split."""
        node = self._arena.get(node_id)

        if isinstance(node, LeafNode):
            location = key_location(key, node.keys)
            node.insert_entry(location, key, value)
            self._emit(TraceKind.LEAF_INSERT, node_id, key=key, index=location)

            if len(node) < self._branching_factor:
                return None
            return self._split_leaf(node_id, node)

        child_index = route(node, key)
        child_id = node.children[child_index]
        self._emit(TraceKind.DESCEND, node_id, key=key, child_id=child_id, index=child_index)

        promotion = self._insert_rec(child_id, key, value)
        if promotion is None:
            return None

        promoted_key, right_id = promotion
        node.insert_child(child_index, promoted_key, right_id)
        self._emit(
            TraceKind.INTERNAL_INSERT, node_id, key=promoted_key, child_id=right_id, index=child_index
        )

        if len(node) < self._branching_factor:
            return None
        return self._split_internal(node_id, node)

    def _split_leaf(self, node_id: NodeId, node: LeafNode) -> Promotion:
        """Move the upper half of a full leaf into a new right sibling.

        The promoted separator is the right leaf's smallest key, which stays
        in the right leaf.
        """
        right = node.split_off(self._branching_factor // 2)
        right_id = self._arena.allocate(right)
        node.next_leaf = right_id
        promoted_key = right.keys[0]
        self._leaf_splits += 1

        logger.debug(f"Split leaf {node_id} -> {right_id}, promoting {promoted_key!r}")
        self._emit(TraceKind.LEAF_SPLIT, node_id, key=promoted_key, child_id=right_id)
        return promoted_key, right_id

    def _split_internal(self, node_id: NodeId, node: InternalNode) -> Promotion:
        """Split a full internal node around its median key.

        The median moves up and is removed from both halves.
        """
        promoted_key, right = node.split_off(self._branching_factor // 2)
        right_id = self._arena.allocate(right)
        self._internal_splits += 1

        logger.debug(f"Split internal node {node_id} -> {right_id}, promoting {promoted_key!r}")
        self._emit(TraceKind.INTERNAL_SPLIT, node_id, key=promoted_key, child_id=right_id)
        return promoted_key, right_id

    def _grow_root(self, promotion: Promotion) -> None:
        promoted_key, right_id = promotion
        old_root_id = self._root_id
        self._root_id = self._arena.allocate(InternalNode([promoted_key], [old_root_id, right_id]))
        self._height += 1

        logger.debug(f"Root grew: {old_root_id} -> {self._root_id}, height {self._height}")
        self._emit(TraceKind.ROOT_GROWTH, self._root_id, key=promoted_key, child_id=right_id)

    def _emit(self, kind: TraceKind, node_id: NodeId, **fields) -> None:
        if self._tracer is not None:
            self._tracer(TraceEvent(kind, node_id, **fields))

    # Lookup

    def _find_leaf(self, key: Key) -> tuple[NodeId, LeafNode]:
        """Descend from the root with the insertion routing rule."""
        node_id = self._root_id
        node = self._arena.get(node_id)
        while isinstance(node, InternalNode):
            node_id = node.children[route(node, key)]
            node = self._arena.get(node_id)
        return node_id, node

    def _locate(self, key: Key) -> tuple[LeafNode, int] | None:
        """Return (leaf, position) of the first entry equal to key.

        A separator key lives in the leaf to its right while equal keys route
        left, so the scan continues along next_leaf while the current leaf
        has no entry >= key.
        """
        _, leaf = self._find_leaf(key)
        location = key_location(key, leaf.keys)
        while location == len(leaf) and leaf.next_leaf is not None:
            leaf = self._arena.leaf(leaf.next_leaf)
            location = key_location(key, leaf.keys)

        if location < len(leaf) and leaf.keys[location] == key:
            return leaf, location
        return None

    def lookup(self, key: Key, default: Value | None = None) -> Value | None:
        """Return the first value stored for key, or default if absent."""
        found = self._locate(key)
        if found is None:
            return default
        leaf, location = found
        return leaf.values[location]

    def get(self, key: Key) -> Value:
        """Return the first value stored for key.

        Raises:
            KeyNotFoundError: key is not in the tree
        """
        value = self.lookup(key, _MISSING)
        if value is _MISSING:
            raise KeyNotFoundError(key)
        return value

    def lookup_all(self, key: Key) -> list[Value]:
        """Return every value stored for key, following the leaf chain."""
        found = self._locate(key)
        if found is None:
            return []

        leaf, location = found
        values = []
        while True:
            while location < len(leaf):
                if leaf.keys[location] != key:
                    return values
                values.append(leaf.values[location])
                location += 1
            if leaf.next_leaf is None:
                return values
            leaf = self._arena.leaf(leaf.next_leaf)
            location = 0

    # Inspection

    def _leftmost_leaf_id(self) -> NodeId:
        node_id = self._root_id
        node = self._arena.get(node_id)
        while isinstance(node, InternalNode):
            node_id = node.children[0]
            node = self._arena.get(node_id)
        return node_id

    def iter_leaves(self) -> Iterator[tuple[NodeId, LeafNode]]:
        """Iterate leaves in key order by following sibling links."""
        leaf_id: NodeId | None = self._leftmost_leaf_id()
        while leaf_id is not None:
            leaf = self._arena.leaf(leaf_id)
            yield leaf_id, leaf
            leaf_id = leaf.next_leaf

    def stats(self) -> TreeStats:
        """Return a structural summary of the tree."""
        leaf_count = sum(1 for _, node in self._arena.items() if isinstance(node, LeafNode))
        return TreeStats(
            entries=self._size,
            height=self._height,
            node_count=len(self._arena),
            leaf_count=leaf_count,
            internal_count=len(self._arena) - leaf_count,
            leaf_splits=self._leaf_splits,
            internal_splits=self._internal_splits,
            root_id=self._root_id,
        )

    def dump(self, show_values: bool = False) -> str:
        """Render every node from the root down as indented text."""
        return render_tree(self, show_values=show_values)

    def check_invariants(self) -> None:
        """Walk the whole tree and raise InvariantViolation on the first defect."""
        leaf_order: list[NodeId] = []
        visited: set[NodeId] = set()
        entries = self._check_node(self._root_id, 0, _MISSING, _MISSING, visited, leaf_order)

        if entries != self._size:
            raise InvariantViolation(f"Tree holds {entries} entries, expected {self._size}")
        if len(visited) != len(self._arena):
            raise InvariantViolation(
                f"{len(self._arena) - len(visited)} arena nodes are unreachable from the root"
            )

        chain = [leaf_id for leaf_id, _ in self.iter_leaves()]
        if chain != leaf_order:
            raise InvariantViolation(f"Leaf chain {chain} does not match tree order {leaf_order}")

        keys = [key for _, leaf in self.iter_leaves() for key in leaf.keys]
        if not is_sorted(keys):
            raise InvariantViolation("Leaf chain keys are not in ascending order")

    def _check_node(
        self,
        node_id: NodeId,
        depth: int,
        low: object,
        high: object,
        visited: set[NodeId],
        leaf_order: list[NodeId],
    ) -> int:
        """Check node_id and its subtree; return the number of entries below."""
        if node_id in visited:
            raise InvariantViolation(f"Node {node_id} is reachable twice")
        visited.add(node_id)

        node = self._arena.get(node_id)
        if len(node) > self._branching_factor - 1:
            raise InvariantViolation(
                f"Node {node_id} holds {len(node)} keys, limit is {self._branching_factor - 1}"
            )
        if not is_sorted(node.keys):
            raise InvariantViolation(f"Node {node_id} keys are not sorted: {node.keys!r}")
        for key in node.keys:
            if (low is not _MISSING and key < low) or (high is not _MISSING and high < key):
                raise InvariantViolation(f"Key {key!r} in node {node_id} is outside its separators")

        if isinstance(node, LeafNode):
            if depth != self._height:
                raise InvariantViolation(f"Leaf {node_id} at depth {depth}, height is {self._height}")
            if len(node.keys) != len(node.values):
                raise InvariantViolation(f"Leaf {node_id} has mismatched keys and values")
            leaf_order.append(node_id)
            return len(node)

        if len(node.children) != len(node.keys) + 1:
            raise InvariantViolation(
                f"Internal node {node_id} has {len(node.children)} children for {len(node.keys)} keys"
            )

        total = 0
        for i, child_id in enumerate(node.children):
            child_low = node.keys[i - 1] if i > 0 else low
            child_high = node.keys[i] if i < len(node.keys) else high
            total += self._check_node(child_id, depth + 1, child_low, child_high, visited, leaf_order)
        return total
