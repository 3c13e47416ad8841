"""Node arena implementation.

Uses sortedcontainers.SortedDict so nodes are always enumerable in id
(allocation) order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from ..core.errors import InvariantViolation, NodeNotFoundError, NodeVariantError
from .ids import NodeIdGenerator
from .nodes import InternalNode, LeafNode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import NodeId
    from ..interfaces.ids import IdGenerator
    from .nodes import Node

logger = logging.getLogger(__name__)


class NodeArena:
    """Mapping from node id to node contents; the only place nodes live.

    Args:
        id_generator: Source of fresh ids (a new generator starting at 0 if
            omitted)

    Invariants:
        - Every id handed out by allocate() stays resolvable
        - No node is ever removed
    """

    def __init__(self, id_generator: IdGenerator | None = None):
        self._ids = id_generator if id_generator is not None else NodeIdGenerator()
        self._nodes: SortedDict = SortedDict()

    def allocate(self, node: Node) -> NodeId:
        """Store node under a fresh id and return the id."""
        node_id = self._ids.next_id()
        if node_id in self._nodes:
            raise InvariantViolation(f"Id generator reissued node id {node_id}")
        self._nodes[node_id] = node
        logger.debug(f"Allocated {type(node).__name__} {node_id}")
        return node_id

    def get(self, node_id: NodeId) -> Node:
        """Return the node stored under node_id.

        The returned node is mutated in place by the engine.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"Node {node_id} is not in the arena") from None

    def leaf(self, node_id: NodeId) -> LeafNode:
        """Return node_id, which must be a leaf."""
        node = self.get(node_id)
        if not isinstance(node, LeafNode):
            raise NodeVariantError(f"Node {node_id} is not a leaf")
        return node

    def internal(self, node_id: NodeId) -> InternalNode:
        """Return node_id, which must be an internal node."""
        node = self.get(node_id)
        if not isinstance(node, InternalNode):
            raise NodeVariantError(f"Node {node_id} is not an internal node")
        return node

    def items(self) -> Iterator[tuple[NodeId, Node]]:
        """Iterate (id, node) pairs in id order."""
        yield from self._nodes.items()

    def __contains__(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
