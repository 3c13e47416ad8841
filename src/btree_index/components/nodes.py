"""Node variants stored in the arena.

A node is either a leaf holding (key, value) entries plus a forward link to
the next leaf, or an internal node holding separator keys and child ids.
Nodes never reference each other directly, only through node ids.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..core.types import Entry, Key, NodeId, Value


@dataclass
class LeafNode:
    """Leaf node: ascending keys with parallel values.

    Keys and values are kept in separate lists so that keys can be searched
    without ever comparing values.
    """

    keys: list[Key] = field(default_factory=list)
    values: list[Value] = field(default_factory=list)
    next_leaf: NodeId | None = None

    @property
    def is_leaf(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.keys)

    def entries(self) -> list[Entry]:
        return list(zip(self.keys, self.values))

    def insert_entry(self, location: int, key: Key, value: Value) -> None:
        """Insert (key, value) at location, shifting later entries right."""
        self.keys.insert(location, key)
        self.values.insert(location, value)

    def split_off(self, at: int) -> LeafNode:
        """Move entries [at:] into a new leaf that inherits the sibling link.

        The caller is responsible for pointing next_leaf at the new leaf once
        it has an id.
        """
        right = LeafNode(self.keys[at:], self.values[at:], self.next_leaf)
        del self.keys[at:]
        del self.values[at:]
        return right


@dataclass
class InternalNode:
    """Internal node: m separator keys and m+1 child ids."""

    keys: list[Key] = field(default_factory=list)
    children: list[NodeId] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.keys)

    def insert_child(self, child_index: int, key: Key, right_id: NodeId) -> None:
        """Place a promotion coming from children[child_index].

        The separator goes to position child_index and the new right node
        directly after the child it was split from.
        """
        self.keys.insert(child_index, key)
        self.children.insert(child_index + 1, right_id)

    def split_off(self, mid: int) -> tuple[Key, InternalNode]:
        """Remove keys[mid] and move everything right of it to a new node.

        Returns (promoted key, right node). The promoted key is kept by
        neither half.
        """
        promoted = self.keys[mid]
        right = InternalNode(self.keys[mid + 1:], self.children[mid + 1:])
        del self.keys[mid:]
        del self.children[mid + 1:]
        return promoted, right


Node = Union[LeafNode, InternalNode]
