"""Protocol definition for the node id generator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import NodeId


@runtime_checkable
class IdGenerator(Protocol):
    """Issues node identifiers."""

    def next_id(self) -> NodeId:
        """Return an id strictly greater than every id returned before.

        Invariants:
            - The first id is the configured start (0 by default)
            - Ids are never reused
        """
        ...
