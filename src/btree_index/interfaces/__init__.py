"""Protocol definitions for the B-tree index components."""
