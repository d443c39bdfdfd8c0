"""Pure-Python Warshall loops for list-of-lists and dict-of-dicts graphs.

Both loops run k (intermediate vertex) outermost, then i (source), then
j (destination), and update the live structure so that later passes see
reachability discovered by earlier ones. Entries are only ever added.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from pyclosure.core.validation import validate_dense_rows, validate_labeled_rows


def close_dense_rows(rows: MutableSequence[MutableSequence[Any]]) -> int:
    """
    Close a V x V matrix of boolean-like values in place.

    Applies M[i][j] = M[i][j] or (M[k][j] and M[i][k]). A cell that becomes
    reachable receives the value stored in M[i][k], so 0/1 matrices stay
    0/1 and True/False matrices stay boolean.

    Args:
        rows: Mutable sequence of V mutable rows, each of length V

    Returns:
        Number of cells newly set

    Raises:
        MalformedGraphError: If rows are jagged, not square, or immutable
    """
    n_vertices = validate_dense_rows(rows)
    updates = 0

    for k in range(n_vertices):
        row_k = rows[k]
        for i in range(n_vertices):
            row_i = rows[i]
            reach_ik = row_i[k]
            if not reach_ik:
                continue
            for j in range(n_vertices):
                if not row_i[j] and row_k[j]:
                    row_i[j] = reach_ik
                    updates += 1

    return updates


def close_labeled_rows(graph: Mapping[Any, MutableMapping[Any, Any]]) -> int:
    """
    Close a label -> {label: marker} adjacency mapping in place.

    The vertex set is captured from the outer keys before any mutation.
    Adjacency is probed with ``.get`` only, so a missing entry is never
    created by a read (this holds for defaultdict rows too). Newly
    reachable entries are stored as True. A target label with no row of
    its own is not a vertex: its entries are kept but never extended.

    Args:
        graph: Mapping from label to a mutable mapping of successor labels

    Returns:
        Number of entries newly set

    Raises:
        MalformedGraphError: If a row is immutable or shared between labels
    """
    validate_labeled_rows(graph)
    vertices = tuple(graph)
    rows = [graph[v] for v in vertices]
    updates = 0

    for k, row_k in zip(vertices, rows):
        for row_i in rows:
            if not row_i.get(k):
                continue
            for j in vertices:
                if not row_i.get(j) and row_k.get(j):
                    row_i[j] = True
                    updates += 1

    return updates


def dense_rows_are_closed(rows: Sequence[Sequence[Any]]) -> bool:
    """Return True if i->k and k->j imply i->j everywhere in a dense matrix."""
    n_vertices = len(rows)
    for k in range(n_vertices):
        row_k = rows[k]
        for i in range(n_vertices):
            row_i = rows[i]
            if not row_i[k]:
                continue
            for j in range(n_vertices):
                if row_k[j] and not row_i[j]:
                    return False
    return True


def labeled_rows_are_closed(graph: Mapping[Any, Mapping[Any, Any]]) -> bool:
    """Return True if i->k and k->j imply i->j everywhere in a labeled graph."""
    for k, row_k in graph.items():
        for row_i in graph.values():
            if not row_i.get(k):
                continue
            for j, marker in row_k.items():
                if marker and j in graph and not row_i.get(j):
                    return False
    return True
