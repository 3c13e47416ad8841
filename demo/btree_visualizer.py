#!/usr/bin/env python3
"""B-tree Metrics Visualizer

Reads the metrics CSV written by the demo driver and plots how the tree
grows: height, node counts and cumulative splits against inserts.

Usage:
    python demo/btree_demo_driver.py --num-keys 5000 --out-csv /tmp/btree_metrics.csv
    python demo/btree_visualizer.py --csv /tmp/btree_metrics.csv --output /tmp/btree.png
"""

from __future__ import annotations

import argparse
import csv

import matplotlib
import matplotlib.pyplot as plt

INT_COLUMNS = [
    "ops_total",
    "entries",
    "height",
    "node_count",
    "leaf_count",
    "internal_count",
    "leaf_splits",
    "internal_splits",
    "root_id",
]


def load_csv_data(csv_path: str) -> list[dict]:
    """Load CSV data and convert numeric fields."""
    rows = []
    try:
        with open(csv_path) as f:
            reader = csv.DictReader(f)
            for row in reader:
                for key in INT_COLUMNS:
                    row[key] = int(row[key])
                row["event"] = row.get("event") or ""
                rows.append(row)
    except FileNotFoundError:
        pass
    return rows


def plot_static(csv_path: str, output_path: str | None = None) -> None:
    """Generate static plots from CSV data."""
    rows = load_csv_data(csv_path)

    if not rows:
        print(f"No data found in {csv_path}")
        return

    if output_path:
        matplotlib.use("Agg")

    ops = [row["ops_total"] for row in rows]
    fig, axes = plt.subplots(3, 1, figsize=(12, 9), sharex=True)
    fig.suptitle("B-tree Growth", fontsize=14, fontweight="bold")

    # (1) Height, with root growth marked
    axes[0].step(ops, [row["height"] for row in rows], where="post", linewidth=2)
    axes[0].set_ylabel("height", fontsize=11)
    axes[0].set_title("Tree Height", fontsize=12, fontweight="bold")
    axes[0].grid(True, alpha=0.3)
    for row in rows:
        if row["event"].startswith("root_growth"):
            axes[0].axvline(row["ops_total"], color="red", linestyle="--", alpha=0.5, linewidth=1)

    # (2) Node counts (stacked area)
    leaves = [row["leaf_count"] for row in rows]
    internals = [row["internal_count"] for row in rows]
    axes[1].fill_between(ops, 0, leaves, alpha=0.6, label="leaf")
    axes[1].fill_between(
        ops, leaves, [a + b for a, b in zip(leaves, internals)], alpha=0.6, label="internal"
    )
    axes[1].set_ylabel("nodes (stacked)", fontsize=11)
    axes[1].legend(loc="upper left")
    axes[1].set_title("Nodes in Arena", fontsize=12, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    # (3) Cumulative splits
    axes[2].plot(ops, [row["leaf_splits"] for row in rows], label="leaf splits", linewidth=2)
    axes[2].plot(ops, [row["internal_splits"] for row in rows], label="internal splits", linewidth=2)
    axes[2].set_ylabel("splits", fontsize=11)
    axes[2].set_xlabel("inserts", fontsize=11)
    axes[2].legend(loc="upper left")
    axes[2].set_title("Splits", fontsize=12, fontweight="bold")
    axes[2].grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
        print(f"Plot saved to {output_path}")
    else:
        plt.show()


def main() -> None:
    """Parse arguments and plot."""
    p = argparse.ArgumentParser(description="B-tree metrics visualizer")
    p.add_argument("--csv", default="/tmp/btree_metrics.csv", help="Metrics CSV file")
    p.add_argument("--output", default=None, help="Save plot to file instead of showing it")
    args = p.parse_args()

    plot_static(args.csv, args.output)


if __name__ == "__main__":
    main()
