"""Benchmark configuration constants."""

from pathlib import Path

# Paths
BENCHMARKS_DIR = Path(__file__).parent
OUTPUT_DIR = BENCHMARKS_DIR / "output"

# Scale levels (vertices V); each level is double the previous so the
# V -> 2V time ratio can be read off directly (expect ~8 for O(V^3))
SCALE_LEVELS = [50, 100, 200, 400, 800, 1600]

# Quick mode scale levels
QUICK_SCALE_LEVELS = [25, 50, 100, 200]

# The pure-Python loops are far slower; cap their scale
MAX_PURE_PYTHON_VERTICES = 200

# Edge probability for random graphs
EDGE_DENSITIES = [0.01, 0.1]

# Implementations to benchmark
IMPLEMENTATIONS = {
    "dense_lists": {"complexity": "O(V^3)", "function": "compute_closure"},
    "labeled_dicts": {"complexity": "O(V^3)", "function": "compute_closure"},
    "numpy_serial": {"complexity": "O(V^3)", "function": "warshall_closure_serial"},
    "numpy_parallel": {"complexity": "O(V^3)", "function": "warshall_closure_parallel"},
}

# Benchmark parameters
NUM_WARMUP_RUNS = 1
NUM_TIMED_RUNS = 3
