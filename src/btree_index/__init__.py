"""btree-index - in-memory arena-based B-tree index in Python."""

from .core.config import BTreeConfig
from .core.errors import (
    BTreeError,
    KeyNotFoundError,
    InvalidBranchingFactorError,
    InvariantViolation,
    NodeNotFoundError,
    NodeVariantError,
)
from .core.tree import BTree
from .core.types import Key, Value, NodeId, Entry, Promotion, TreeStats
from .components.trace import LoggingTracer, RecordingTracer, TraceEvent, TraceKind

__all__ = [
    "BTreeConfig",
    "BTreeError",
    "KeyNotFoundError",
    "InvalidBranchingFactorError",
    "InvariantViolation",
    "NodeNotFoundError",
    "NodeVariantError",
    "BTree",
    "Key",
    "Value",
    "NodeId",
    "Entry",
    "Promotion",
    "TreeStats",
    "LoggingTracer",
    "RecordingTracer",
    "TraceEvent",
    "TraceKind",
]
