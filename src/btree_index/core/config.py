"""Configuration for the B-tree index.

Defines the tunable parameters of the tree engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BTreeConfig:
    """Configuration parameters for the B-tree engine.

    Attributes:
        branching_factor: Overflow threshold; a node splits once its key
            count reaches this value. Must be an int >= 2.
        log_trace: Emit every descent/split event through logging at DEBUG
            when no explicit tracer is passed to the tree.
    """

    branching_factor: int = 32
    log_trace: bool = False
