"""Protocol definition for the node arena."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..components.nodes import InternalNode, LeafNode, Node
    from ..core.types import NodeId


@runtime_checkable
class Arena(Protocol):
    """Sole owner of node contents, addressed by node id."""

    def allocate(self, node: Node) -> NodeId:
        """Store node under a fresh id and return the id."""
        ...

    def get(self, node_id: NodeId) -> Node:
        """Return the node stored under node_id.

        Raises NodeNotFoundError if the id is unknown.
        """
        ...

    def leaf(self, node_id: NodeId) -> LeafNode:
        """Return node_id, which must be a leaf."""
        ...

    def internal(self, node_id: NodeId) -> InternalNode:
        """Return node_id, which must be an internal node."""
        ...

    def items(self) -> Iterator[tuple[NodeId, Node]]:
        """Iterate (id, node) pairs in id order."""
        ...
