#!/usr/bin/env python3
"""
Insert / find / remove benchmark for OrderedTreeLib.

For each tree size n, inserts a shuffled permutation of 1..n, then times 100
membership checks and 100 removals. Results are written as CSV rows:

    n,insert_time,find_time,remove_time

insert_time is in milliseconds, find_time and remove_time in microseconds.
"""

import argparse
import gc
import random
import sys
import time
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import BinarySearchTree


def benchmark_size(n: int, probes: int = 100, seed: int = None) -> Tuple[int, int, int]:
    """Run one insert/find/remove round for a tree of ``n`` values."""
    elements = list(range(1, n + 1))
    random.Random(seed).shuffle(elements)
    tree = BinarySearchTree()

    gc.collect()
    start = time.perf_counter()
    for value in elements:
        tree.insert(value)
    insert_ms = int((time.perf_counter() - start) * 1_000)

    sample = elements[:probes]

    start = time.perf_counter()
    for value in sample:
        tree.contains(value)
    find_us = int((time.perf_counter() - start) * 1_000_000)

    start = time.perf_counter()
    for value in sample:
        tree.remove(value)
    remove_us = int((time.perf_counter() - start) * 1_000_000)

    return insert_ms, find_us, remove_us


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description="OrderedTreeLib insert/find/remove benchmark")
    parser.add_argument("--output", type=Path, default=Path("performance.csv"),
                        help="CSV file to write (default: performance.csv)")
    parser.add_argument("--sizes", type=int, nargs="+", default=[1_000, 10_000, 100_000],
                        help="Tree sizes to benchmark")
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    args = parser.parse_args(argv)

    with args.output.open("w") as out:
        out.write("n,insert_time,find_time,remove_time\n")
        for n in args.sizes:
            insert_ms, find_us, remove_us = benchmark_size(n, seed=args.seed)
            out.write(f"{n},{insert_ms},{find_us},{remove_us}\n")
            print(f"Completed test for n = {n}")

    print(f"Results written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
