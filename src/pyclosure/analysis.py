"""Reachability analysis built on the transitive closure."""

from __future__ import annotations

import time
from typing import Any

import numpy as np

from pyclosure._kernels import warshall_closure_counted
from pyclosure.core.graphs import DenseMatrix, as_graph
from pyclosure.core.result import ClosureResult
from pyclosure.core.types import Edge
from pyclosure.graph.warshall import close_labeled_rows


def analyze_closure(graph: Any) -> ClosureResult:
    """
    Compute the transitive closure of a copy of graph and report on it.

    The graph is converted to its typed representation (DenseMatrix or
    LabeledAdjacency) and a copy is closed, so the argument is never
    modified. Dense graphs run the unoptimized counting kernel, which
    evaluates every (k, i, j) triple; useful for checking that the work
    grows as V^3.

    Args:
        graph: Any graph accepted by compute_closure, or a typed graph

    Returns:
        ClosureResult with edge counts, newly reachable pairs, the closed
        copy and timing

    Raises:
        UnsupportedGraphError: If graph has an unsupported shape
        MalformedGraphError: If graph fails shape validation

    Example:
        >>> result = analyze_closure({"a": {"b": 1}, "b": {"c": 1}, "c": {}})
        >>> result.new_edges
        [('a', 'c')]
        >>> print(result.summary())
    """
    start_time = time.perf_counter()

    original = as_graph(graph)
    closed = original.copy()
    n_vertices = closed.num_vertices
    new_edges: list[Edge]

    if isinstance(closed, DenseMatrix):
        steps, _ = warshall_closure_counted(closed.adjacency)
        operations = int(steps)
        added = closed.adjacency & ~original.adjacency
        new_edges = [(int(i), int(j)) for i, j in np.argwhere(added)]
        representation = "dense"
    else:
        close_labeled_rows(closed.adjacency)
        operations = n_vertices**3
        new_edges = [
            (src, dst) for src, dst in closed.edges() if not original.lookup(src, dst)
        ]
        representation = "labeled"

    computation_time = (time.perf_counter() - start_time) * 1000

    return ClosureResult(
        representation=representation,
        num_vertices=n_vertices,
        num_input_edges=original.num_edges,
        num_closure_edges=closed.num_edges,
        new_edges=new_edges,
        operations=operations,
        is_strongly_connected=n_vertices > 0 and closed.num_edges == n_vertices**2,
        closure=closed,
        computation_time_ms=computation_time,
    )
