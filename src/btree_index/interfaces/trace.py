"""Protocol definition for the trace hook."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..components.trace import TraceEvent


@runtime_checkable
class TraceHook(Protocol):
    """Observer called on every descent step and structural change."""

    def __call__(self, event: TraceEvent) -> None:
        """Receive one event. Must not mutate the tree."""
        ...
