#!/usr/bin/env python3
"""
Scaling benchmark for PyClosure.

Times each closure implementation at doubling vertex counts. Doubling V
should multiply the time of an O(V^3) algorithm by about 8; the ratio
column makes that visible.

Usage:
    python benchmarks/run_scaling.py                  # all levels
    python benchmarks/run_scaling.py --quick          # up to 200 vertices
    python benchmarks/run_scaling.py --implementation numpy_serial
    python benchmarks/run_scaling.py --max-vertices 400 --output out.csv
"""

import argparse
import csv
import sys
import time
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Callable

import numpy as np

# Make `benchmarks` and the source tree importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from benchmarks.config import (
    EDGE_DENSITIES,
    IMPLEMENTATIONS,
    MAX_PURE_PYTHON_VERTICES,
    NUM_TIMED_RUNS,
    NUM_WARMUP_RUNS,
    OUTPUT_DIR,
    QUICK_SCALE_LEVELS,
    SCALE_LEVELS,
)

from pyclosure import compute_closure
from pyclosure._kernels import warshall_closure_parallel, warshall_closure_serial

Prepare = Callable[[np.ndarray], Any]
Run = Callable[[Any], Any]


@dataclass
class Timing:
    """Best and mean wall time of one implementation at one scale."""

    implementation: str
    n_vertices: int
    density: float
    best_ms: float
    mean_ms: float
    ratio: float | None = None  # best_ms / best_ms at V/2


def random_graph(n_vertices: int, density: float, seed: int = 42) -> np.ndarray:
    """Boolean adjacency matrix with self-loops seeded."""
    adj = np.random.default_rng(seed).random((n_vertices, n_vertices)) < density
    np.fill_diagonal(adj, True)
    return adj


def _as_lists(adj: np.ndarray) -> list[list[int]]:
    return adj.astype(int).tolist()


def _as_dicts(adj: np.ndarray) -> dict[int, dict[int, int]]:
    return {i: {int(j): 1 for j in np.flatnonzero(row)} for i, row in enumerate(adj)}


RUNNERS: dict[str, tuple[Prepare, Run]] = {
    "dense_lists": (_as_lists, compute_closure),
    "labeled_dicts": (_as_dicts, compute_closure),
    "numpy_serial": (np.copy, warshall_closure_serial),
    "numpy_parallel": (np.copy, warshall_closure_parallel),
}


def time_closure(name: str, n_vertices: int, density: float) -> Timing:
    """Time *name* on a fresh copy of the same random graph each run."""
    prepare, run = RUNNERS[name]
    adj = random_graph(n_vertices, density)

    # Warmup also triggers Numba compilation
    for _ in range(NUM_WARMUP_RUNS):
        run(prepare(adj))

    samples = []
    for _ in range(NUM_TIMED_RUNS):
        graph = prepare(adj)
        start = time.perf_counter()
        run(graph)
        samples.append((time.perf_counter() - start) * 1000)

    return Timing(
        implementation=name,
        n_vertices=n_vertices,
        density=density,
        best_ms=min(samples),
        mean_ms=float(np.mean(samples)),
    )


def fill_ratios(timings: list[Timing]) -> None:
    """Set each timing's ratio against the previous level of the same series."""
    previous: dict[tuple[str, float], Timing] = {}
    for t in timings:
        key = (t.implementation, t.density)
        before = previous.get(key)
        if before is not None and before.best_ms > 0:
            t.ratio = t.best_ms / before.best_ms
        previous[key] = t


def print_table(timings: list[Timing]) -> None:
    print(f"\n{'Implementation':<16} {'Density':>8} {'V':>6} {'Best ms':>12} {'Ratio':>8}")
    print("-" * 54)
    for t in timings:
        ratio = f"{t.ratio:.2f}" if t.ratio is not None else ""
        print(
            f"{t.implementation:<16} {t.density:>8} {t.n_vertices:>6} "
            f"{t.best_ms:>12.2f} {ratio:>8}"
        )


def write_csv(timings: list[Timing], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=[fld.name for fld in fields(Timing)])
        writer.writeheader()
        for t in timings:
            writer.writerow(asdict(t))


def main() -> int:
    parser = argparse.ArgumentParser(description="PyClosure scaling benchmark")
    parser.add_argument("--quick", action="store_true", help="Small scale levels only")
    parser.add_argument(
        "--implementation",
        choices=sorted(IMPLEMENTATIONS),
        help="Benchmark a single implementation",
    )
    parser.add_argument(
        "--max-vertices", type=int, default=None, help="Skip scale levels above this"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_DIR / "scaling_results.csv",
        help="CSV output path",
    )
    args = parser.parse_args()

    levels = QUICK_SCALE_LEVELS if args.quick else SCALE_LEVELS
    if args.max_vertices is not None:
        levels = [n for n in levels if n <= args.max_vertices]
    names = [args.implementation] if args.implementation else list(IMPLEMENTATIONS)

    timings = []
    started = time.perf_counter()
    for name in names:
        pure_python = name in ("dense_lists", "labeled_dicts")
        for density in EDGE_DENSITIES:
            for n in levels:
                if pure_python and n > MAX_PURE_PYTHON_VERTICES:
                    break
                print(f"Timing {name} V={n} density={density}...", flush=True)
                timings.append(time_closure(name, n, density))

    fill_ratios(timings)
    print_table(timings)
    print(f"\nTotal time: {time.perf_counter() - started:.1f} s")

    write_csv(timings, args.output)
    print(f"Results written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
