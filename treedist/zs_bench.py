"""Timing runs of the Zhang-Shasha distance on generated trees."""

from __future__ import annotations

import argparse
import csv
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .zhang_shasha import TreeEditing
from .zs_generators import balanced_tree, chain_tree, random_tree
from .zs_tree import ZSTree

RANDOM_SIZES = (10, 100, 1000, 10000)
SHAPE_SIZES = (10000,)
RANDOM_CSV = "RAND_complexity_results.csv"
SHAPE_CSV = "BW_complexity_results.csv"
CSV_HEADER = (
    "Tree1Size",
    "Tree1RootKeys",
    "Tree2Size",
    "Tree2RootKeys",
    "ExecutionTimeMs",
    "Distance",
    "MemoryKB",
)

_INT_BYTES = 4
_POINTER_BYTES = 8


@dataclass(frozen=True)
class ZSResult:
    """Outcome of one timed distance computation."""

    tree1_size: int
    tree1_keyroots: int
    tree2_size: int
    tree2_keyroots: int
    time_ms: float
    distance: int
    memory_kb: float


def _table_bytes(tree1: ZSTree, tree2: ZSTree) -> int:
    # Two |T1| x |T2| integer tables.
    return 2 * len(tree1) * len(tree2) * _INT_BYTES


def _measure(tree1: ZSTree, tree2: ZSTree, size1: int, size2: int, memory: float) -> ZSResult:
    start = time.perf_counter()
    distance = TreeEditing(tree1, tree2).tree_edit_distance()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return ZSResult(
        size1,
        len(tree1.keyroots),
        size2,
        len(tree2.keyroots),
        elapsed_ms,
        distance,
        memory,
    )


def run_chain_test(size: int) -> ZSResult:
    """Time the distance between two linear chains of ``size`` nodes."""
    tree1, tree2 = chain_tree(size), chain_tree(size)
    memory = _table_bytes(tree1, tree2) / (1024.0 * 1024.0)
    return _measure(tree1, tree2, size, size, memory)


def run_balanced_test(size: int) -> ZSResult:
    """Time the distance between two balanced binary trees of ``size`` nodes."""
    tree1, tree2 = balanced_tree(size), balanced_tree(size)
    memory = _table_bytes(tree1, tree2) / (1024.0 * 1024.0)
    return _measure(tree1, tree2, size, size, memory)


def run_random_test(size1: int, size2: int, seed1: int, seed2: int) -> ZSResult:
    """Time the distance between two seeded random trees."""
    tree1, tree2 = random_tree(size1, seed1), random_tree(size2, seed2)
    memory_bytes = _table_bytes(tree1, tree2) + (len(tree1) + len(tree2)) * _POINTER_BYTES
    return _measure(tree1, tree2, size1, size2, memory_bytes / 1024.0)


def write_csv(results: Iterable[ZSResult], path: str | Path) -> None:
    """Write results as CSV; raises OSError if the file cannot be created."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for result in results:
            writer.writerow(
                [
                    result.tree1_size,
                    result.tree1_keyroots,
                    result.tree2_size,
                    result.tree2_keyroots,
                    f"{result.time_ms:.4f}",
                    result.distance,
                    f"{result.memory_kb:.2f}",
                ]
            )


def _save(results: Sequence[ZSResult], path: str | Path) -> None:
    try:
        write_csv(results, path)
    except OSError:
        print(f"Error: Could not create file {path}")
        return
    print(f"Results saved to: {path}")


def _banner() -> None:
    print("=" * 40)
    print("  PERFORMANCE ANALYSIS - ZHANG-SHASHA ALGORITHM")
    print("       Tree Edit Distance (TED)")
    print("=" * 40)
    print()


def _report(result: ZSResult, wall_ms: float, *, memory: bool = True) -> None:
    print(f" Completed in {int(wall_ms)} ms")
    print(f"  Tree 1 size: {result.tree1_size} (Root Keys: {result.tree1_keyroots})")
    print(f"  Tree 2 size: {result.tree2_size} (Root Keys: {result.tree2_keyroots})")
    print(f"  Algorithm time: {result.time_ms:.2f} ms")
    print(f"  Edit distance: {result.distance}")
    if memory:
        print(f"  Estimated memory usage: {result.memory_kb:.2f} KB")


def random_tests(
    sizes: Sequence[int] = RANDOM_SIZES, path: str | Path = RANDOM_CSV
) -> list[ZSResult]:
    """Compare pairs of seeded random trees of each size and save the results."""
    _banner()
    print("Running tests for different tree sizes...")
    print("Sizes tested: " + ", ".join(str(size) for size in sizes) + " nodes")
    print("-" * 60)
    results: list[ZSResult] = []
    for size in sizes:
        print(f"Testing trees of size {size}...", end="", flush=True)
        start = time.perf_counter()
        result = run_random_test(size, size, size * 10, size * 20)
        results.append(result)
        _report(result, (time.perf_counter() - start) * 1000.0)
        print()
        print()
    print("-" * 60)
    _save(results, path)
    print("=" * 40)
    print("           TESTS COMPLETED")
    print("=" * 40)
    print()
    return results


def best_worst_case_tests(
    sizes: Sequence[int] = SHAPE_SIZES, path: str | Path = SHAPE_CSV
) -> list[ZSResult]:
    """Compare chain trees and balanced trees of each size and save the results."""
    _banner()
    print("Running comprehensive performance tests...")
    print("Test scenarios: Linear chains, Balanced trees")
    print("Sizes tested: " + ", ".join(str(size) for size in sizes) + " nodes")
    print("=" * 70)
    results: list[ZSResult] = []
    for size in sizes:
        print()
        print("-" * 70)
        print(f"TESTING TREES OF SIZE {size}")
        print("-" * 70)

        print()
        print("1. LINEAR CHAIN TEST:")
        print(f"Testing linear chain trees of size {size}...", end="", flush=True)
        start = time.perf_counter()
        chain = run_chain_test(size)
        results.append(chain)
        _report(chain, (time.perf_counter() - start) * 1000.0)

        print()
        print("2. BALANCED TREE TEST:")
        print(f"Testing balanced trees of size {size}...", end="", flush=True)
        start = time.perf_counter()
        balanced = run_balanced_test(size)
        results.append(balanced)
        _report(balanced, (time.perf_counter() - start) * 1000.0, memory=False)

        print()
        print("3. PERFORMANCE COMPARISON:")
        if chain.time_ms > 0:
            print(f"  Balanced vs Chain:   {balanced.time_ms / chain.time_ms:.2f}x")
        else:
            print("  Balanced vs Chain:   n/a")
    print()
    print("=" * 70)
    _save(results, path)
    print()
    print("=" * 40)
    print("      COMPREHENSIVE TESTS COMPLETED")
    print("=" * 40)
    print()
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the random tests, then the chain and balanced tests."""
    parser = argparse.ArgumentParser(
        description="Zhang-Shasha tree edit distance performance analysis"
    )
    parser.add_argument("--random-sizes", type=int, nargs="+", default=list(RANDOM_SIZES))
    parser.add_argument("--shape-sizes", type=int, nargs="+", default=list(SHAPE_SIZES))
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    args = parser.parse_args(argv)
    random_tests(args.random_sizes, args.output_dir / RANDOM_CSV)
    best_worst_case_tests(args.shape_sizes, args.output_dir / SHAPE_CSV)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())