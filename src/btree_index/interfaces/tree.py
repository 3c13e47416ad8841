"""Protocol definition for the ordered index."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import Key, Value


@runtime_checkable
class OrderedIndex(Protocol):
    """Public API of the in-memory ordered index."""

    def insert(self, key: Key, value: Value) -> None:
        """Insert the pair. Duplicate keys accumulate; never fails."""
        ...

    def lookup(self, key: Key, default: Value | None = None) -> Value | None:
        """Return a value stored for key, or default if absent."""
        ...

    def get(self, key: Key) -> Value:
        """Return a value stored for key; raise KeyNotFoundError if absent."""
        ...

    def lookup_all(self, key: Key) -> list[Value]:
        """Return every value stored for key in key order."""
        ...

    def __len__(self) -> int:
        """Return number of stored entries."""
        ...
