"""Text rendering of a tree's node structure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .nodes import LeafNode

if TYPE_CHECKING:
    from ..core.tree import BTree
    from ..core.types import NodeId


def render_tree(tree: BTree, show_values: bool = False, indent: str = "    ") -> str:
    """Return an indented dump of every node reachable from the root.

    Example (branching factor 3 after inserting 20, 7, 13)::

        Internal 2: keys=[13] children=[0, 1]
            Leaf 0: [7] -> 1
            Leaf 1: [13, 20] -> None
    """
    lines: list[str] = []

    def walk(node_id: NodeId, depth: int) -> None:
        node = tree.arena.get(node_id)
        prefix = indent * depth
        if isinstance(node, LeafNode):
            body = node.entries() if show_values else node.keys
            lines.append(f"{prefix}Leaf {node_id}: {body!r} -> {node.next_leaf}")
            return
        lines.append(f"{prefix}Internal {node_id}: keys={node.keys!r} children={node.children!r}")
        for child_id in node.children:
            walk(child_id, depth + 1)

    walk(tree.root_id, 0)
    return "\n".join(lines)
