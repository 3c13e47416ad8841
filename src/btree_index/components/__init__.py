"""B-tree building blocks: ids, nodes, arena, routing, tracing, rendering."""
