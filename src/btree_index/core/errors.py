"""Exception hierarchy for the B-tree index.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class BTreeError(Exception):
    """Base exception for all B-tree errors."""
    pass


class KeyNotFoundError(BTreeError, KeyError):
    """Raised when a looked-up key is not stored in the tree."""
    pass


class InvalidBranchingFactorError(BTreeError, ValueError):
    """Raised at construction when the branching factor is unusable."""
    pass


class InvariantViolation(BTreeError, RuntimeError):
    """Raised when the tree structure is corrupted.

    Signals a programming error inside the engine, not bad user input.
    Callers are not expected to recover from it.
    """
    pass


class NodeNotFoundError(InvariantViolation):
    """Raised when a node id is absent from the arena."""
    pass


class NodeVariantError(InvariantViolation):
    """Raised when a node is not of the expected variant (leaf/internal)."""
    pass
