"""Monotonic node id generator."""

from __future__ import annotations

from ..core.types import NodeId


class NodeIdGenerator:
    """Issues strictly increasing, never-reused node ids.

    Args:
        start: First id handed out (0 by default)
    """

    def __init__(self, start: NodeId = 0):
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._start = start
        self._counter = start

    def next_id(self) -> NodeId:
        """Return the next id."""
        node_id = self._counter
        self._counter += 1
        return node_id

    @property
    def issued(self) -> int:
        """Number of ids handed out so far."""
        return self._counter - self._start

    def __iter__(self):
        return self

    def __next__(self) -> NodeId:
        return self.next_id()

    def __repr__(self) -> str:
        return f"NodeIdGenerator(next={self._counter})"
