"""Shape validation for the graph encodings accepted by PyClosure.

Every check here runs before the closure loop touches the graph, so a
rejected graph is never partially updated.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

import numpy as np

from pyclosure.core.exceptions import MalformedGraphError


def is_dense_rows(obj: Any) -> bool:
    """True for a sequence whose items are sequences (strings excluded)."""
    if isinstance(obj, (str, bytes, bytearray)) or not isinstance(obj, Sequence):
        return False
    return all(
        isinstance(row, Sequence) and not isinstance(row, (str, bytes, bytearray))
        for row in obj
    )


def is_labeled_rows(obj: Any) -> bool:
    """True for a mapping whose values are all mappings."""
    return isinstance(obj, Mapping) and all(
        isinstance(row, Mapping) for row in obj.values()
    )


def validate_array(adjacency: np.ndarray, require_writeable: bool = False) -> None:
    """
    Check that a numpy adjacency matrix is 2-D and square.

    Args:
        adjacency: Candidate dense graph
        require_writeable: Also reject read-only arrays (for in-place updates)

    Raises:
        MalformedGraphError: If the array is not a V x V matrix, or is
            read-only when require_writeable is True
    """
    if adjacency.ndim != 2:
        raise MalformedGraphError(
            f"Adjacency matrix must be 2-D, got {adjacency.ndim}-D array "
            f"with shape {adjacency.shape}"
        )
    if adjacency.shape[0] != adjacency.shape[1]:
        raise MalformedGraphError(
            f"Adjacency matrix must be square, got shape {adjacency.shape}"
        )
    if require_writeable and not adjacency.flags.writeable:
        raise MalformedGraphError(
            "Adjacency matrix is read-only and cannot be updated in place. "
            "Pass a writeable copy or use transitive_closure()."
        )


def validate_dense_rows(
    rows: Sequence[Sequence[Any]], require_mutable: bool = True
) -> int:
    """
    Check that a sequence of rows forms a mutable V x V matrix.

    Args:
        rows: Candidate dense graph

    Returns:
        Number of vertices V

    Raises:
        MalformedGraphError: If rows are jagged, not square, or immutable
    """
    n_vertices = len(rows)
    seen: dict[int, int] = {}
    for i, row in enumerate(rows):
        if len(row) != n_vertices:
            raise MalformedGraphError(
                f"Row {i} has length {len(row)}, expected {n_vertices} "
                f"(graph must be square: {n_vertices} rows x {n_vertices} columns)"
            )
        if require_mutable and not isinstance(row, MutableSequence):
            raise MalformedGraphError(
                f"Row {i} is a {type(row).__name__}, which cannot be updated "
                f"in place. Use lists for rows."
            )
        if require_mutable and id(row) in seen:
            raise MalformedGraphError(
                f"Rows {seen[id(row)]} and {i} are the same list object; every "
                f"row must be a separate list (avoid [[0] * n] * n)."
            )
        seen[id(row)] = i
    return n_vertices


def validate_labeled_rows(
    graph: Mapping[Any, Mapping[Any, Any]],
    require_mutable: bool = True,
    require_known_targets: bool = False,
) -> None:
    """
    Check that a mapping of mappings can be closed.

    Every inner mapping must accept new entries (unless require_mutable is
    False). Raw graphs may name targets that have no row of their own;
    those labels are not vertices and are never used as intermediates.
    With require_known_targets, every inner key must also be an outer key.

    Raises:
        MalformedGraphError: On immutable or shared rows, or on targets
            without a row when require_known_targets is True
    """
    seen: dict[int, Any] = {}
    for label, row in graph.items():
        if require_mutable and not isinstance(row, MutableMapping):
            raise MalformedGraphError(
                f"Adjacency for {label!r} is a {type(row).__name__}, which "
                f"cannot be updated in place. Use dicts for rows."
            )
        if require_mutable and id(row) in seen:
            raise MalformedGraphError(
                f"Vertices {seen[id(row)]!r} and {label!r} share the same adjacency "
                f"mapping object; every vertex needs its own mapping."
            )
        seen[id(row)] = label
        if not require_known_targets:
            continue
        dangling = [target for target in row if target not in graph]
        if dangling:
            preview = dangling[:5]
            more = "..." if len(dangling) > 5 else ""
            raise MalformedGraphError(
                f"Vertex {label!r} has edges to {len(dangling)} labels without "
                f"an adjacency row: {preview}{more}. Add an empty row for each "
                f"target, or build the graph with LabeledAdjacency.from_edges()."
            )
