#!/usr/bin/env python3
"""B-tree Demo Driver

Runs an insert/lookup workload against the B-tree and samples structural
metrics for visualization.

Usage:
    python demo/btree_demo_driver.py --branching-factor 4 --num-keys 5000
    python demo/btree_demo_driver.py --branching-factor 3 --keys 20,7,13,2,10,8 --trace --print-tree
"""

from __future__ import annotations

import argparse
import csv
import logging
import random
import time

from btree_index import BTree, BTreeConfig, LoggingTracer

logger = logging.getLogger("btree_demo")

CSV_HEADER = [
    "ops_total",
    "entries",
    "height",
    "node_count",
    "leaf_count",
    "internal_count",
    "leaf_splits",
    "internal_splits",
    "root_id",
    "event",
]


def build_keys(args: argparse.Namespace) -> list[int]:
    """Produce the insertion sequence for the configured workload."""
    if args.keys:
        return [int(k) for k in args.keys.split(",") if k.strip()]

    rng = random.Random(args.seed)
    keys = list(range(args.num_keys))
    if args.key_order == "descending":
        keys.reverse()
    elif args.key_order == "random":
        rng.shuffle(keys)

    if args.duplicate_rate > 0:
        # replace a share of keys with repeats of earlier ones
        for i in range(1, len(keys)):
            if rng.random() < args.duplicate_rate:
                keys[i] = keys[rng.randrange(i)]
    return keys


def sample_row(tree: BTree, ops_total: int, event: str = "") -> list:
    """Sample current metrics from the tree."""
    stats = tree.stats()
    return [
        ops_total,
        stats["entries"],
        stats["height"],
        stats["node_count"],
        stats["leaf_count"],
        stats["internal_count"],
        stats["leaf_splits"],
        stats["internal_splits"],
        stats["root_id"],
        event,
    ]


def run_demo(args: argparse.Namespace) -> BTree:
    """Run the demo workload and collect metrics."""
    cfg = BTreeConfig(branching_factor=args.branching_factor)
    tracer = LoggingTracer() if args.trace else None
    tree = BTree(cfg, tracer=tracer)
    keys = build_keys(args)

    print(f"Starting B-tree demo with {len(keys)} inserts...")
    print(f"Config: branching_factor={args.branching_factor}, order={args.key_order}")
    print(f"Output: {args.out_csv}")

    t_start = time.time()
    with open(args.out_csv, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_HEADER)
        w.writerow(sample_row(tree, 0))

        prev_height = tree.height
        event = ""
        for ops_total, key in enumerate(keys, start=1):
            tree.insert(key, f"value-{key}")

            if tree.height > prev_height:
                event = f"root_growth_h{tree.height}"
                print(f"  [{ops_total}] ROOT GROWTH: height {prev_height} -> {tree.height}")
                prev_height = tree.height

            if ops_total % args.sample_every == 0 or ops_total == len(keys):
                w.writerow(sample_row(tree, ops_total, event))
                event = ""

    elapsed = time.time() - t_start
    print(f"Inserted {len(keys)} keys in {elapsed:.3f}s")

    misses = sum(1 for key in set(keys) if tree.lookup(key) is None)
    if misses:
        logger.error(f"{misses} inserted keys could not be looked up")
    tree.check_invariants()
    print(f"Final: {tree!r}")

    if args.print_tree:
        print(tree.dump(show_values=args.show_values))

    print(f"Demo complete. Metrics written to {args.out_csv}")
    return tree


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="B-tree demo driver")

    # Engine configuration
    p.add_argument(
        "--branching-factor", type=int, default=4, help="Node overflow threshold (>= 2)"
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Log every descent and split at DEBUG",
    )

    # Workload configuration
    p.add_argument("--num-keys", type=int, default=1000, help="Number of inserts")
    p.add_argument(
        "--key-order",
        choices=["ascending", "descending", "random"],
        default="random",
        help="Insertion order",
    )
    p.add_argument(
        "--duplicate-rate",
        type=float,
        default=0.0,
        help="Probability that an insert repeats an earlier key",
    )
    p.add_argument("--seed", type=int, default=0, help="Random seed")
    p.add_argument(
        "--keys", default="", help="Explicit comma-separated integer keys (overrides workload)"
    )

    # Output configuration
    p.add_argument(
        "--sample-every", type=int, default=10, help="Sample metrics every N inserts"
    )
    p.add_argument(
        "--out-csv", default="/tmp/btree_metrics.csv", help="Output CSV file"
    )
    p.add_argument("--print-tree", action="store_true", help="Dump the final tree")
    p.add_argument("--show-values", action="store_true", help="Include values in the dump")

    args = p.parse_args()
    if args.sample_every < 1:
        p.error("--sample-every must be >= 1")

    logging.basicConfig(
        level=logging.DEBUG if args.trace else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_demo(args)


if __name__ == "__main__":
    main()
