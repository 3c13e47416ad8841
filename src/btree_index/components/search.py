"""Routing and search helpers shared by insertion and lookup."""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..core.types import Key
    from .nodes import InternalNode


def key_location(key: Key, keys: Sequence[Key]) -> int:
    """Return the index of the first key >= key, or len(keys) if none.

    Equal keys yield the position of the leftmost equal key, so new
    duplicates are placed before existing ones and searches tie-break left.
    """
    return bisect_left(keys, key)


def route(node: InternalNode, key: Key) -> int:
    """Return the index of the child key must descend into.

    Descends into the child at the first separator >= key; falls through to
    the last child when every separator is smaller.
    """
    return key_location(key, node.keys)


def is_sorted(keys: Sequence[Key]) -> bool:
    """Return True if keys are non-decreasing."""
    return all(not (b < a) for a, b in zip(keys, keys[1:]))
