"""B-tree index core."""

from .tree import BTree

__all__ = ["BTree"]
