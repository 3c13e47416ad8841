"""Common type definitions for the B-tree index.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import Any, TypedDict

# Core primitive types
Key = Any  # any totally-ordered value
Value = Any
NodeId = int
Entry = tuple[Key, Value]
Promotion = tuple[Key, NodeId]


class TreeStats(TypedDict):
    """Structural summary of a tree at a point in time."""
    entries: int
    height: int
    node_count: int
    leaf_count: int
    internal_count: int
    leaf_splits: int
    internal_splits: int
    root_id: NodeId
