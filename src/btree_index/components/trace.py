"""Structured trace events emitted by the tree engine.

A trace hook is any callable accepting a TraceEvent. The engine calls it on
every descent step and every structural change; with no hook installed the
engine behaves identically, it just emits nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..core.types import Key, NodeId

logger = logging.getLogger(__name__)


class TraceKind(Enum):
    """Kind of engine step being reported."""

    DESCEND = "descend"
    LEAF_INSERT = "leaf_insert"
    INTERNAL_INSERT = "internal_insert"
    LEAF_SPLIT = "leaf_split"
    INTERNAL_SPLIT = "internal_split"
    ROOT_GROWTH = "root_growth"


@dataclass(frozen=True)
class TraceEvent:
    """One engine step.

    Attributes:
        kind: What happened
        node_id: Node the step happened at (the new root for ROOT_GROWTH)
        key: Key being inserted, or the promoted key for splits
        child_id: Child descended into, or the newly allocated node
        index: Child index for DESCEND, entry position for inserts
    """

    kind: TraceKind
    node_id: NodeId
    key: Key = None
    child_id: NodeId | None = None
    index: int | None = None

    def describe(self) -> str:
        parts = [f"{self.kind.value} node={self.node_id}"]
        if self.key is not None:
            parts.append(f"key={self.key!r}")
        if self.index is not None:
            parts.append(f"index={self.index}")
        if self.child_id is not None:
            parts.append(f"child={self.child_id}")
        return " ".join(parts)


class LoggingTracer:
    """Trace hook that writes each event to a logger at DEBUG."""

    def __init__(self, target: logging.Logger | None = None):
        self._logger = target if target is not None else logger

    def __call__(self, event: TraceEvent) -> None:
        self._logger.debug(event.describe())


class RecordingTracer:
    """Trace hook that keeps every event in memory."""

    def __init__(self):
        self.events: list[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: TraceKind) -> list[TraceEvent]:
        return [e for e in self.events if e.kind is kind]

    def clear(self) -> None:
        self.events.clear()
