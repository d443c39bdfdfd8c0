"""Transitive closure of directed graphs with the Floyd-Warshall algorithm.

The closure answers "is there a path from u to v?" for every ordered pair
of vertices. Three entry points cover the ways callers want the result:

    - compute_closure(graph): close graph in place and return the same object
    - close_in_place(graph): close graph in place, return None
    - transitive_closure(graph): close a copy, leave graph untouched

Accepted graphs:
    - Dense: a list of V lists of V boolean-like values, or a V x V numpy array
    - Labeled: a mapping from label to a mapping of successor labels to a
      truthy marker (missing key = no edge)
    - The typed DenseMatrix / LabeledAdjacency representations

Self-loops are not added: seed graph[v][v] before the call if every vertex
should reach itself.
"""

from __future__ import annotations

import copy
import warnings
from typing import Any, TypeVar

import numpy as np

from pyclosure._kernels import is_transitive_numba
from pyclosure.config import get_config, validate_policy
from pyclosure.core.exceptions import UnsupportedGraphError, UnsupportedGraphWarning
from pyclosure.core.graphs import DenseMatrix, LabeledAdjacency
from pyclosure.core.types import UnsupportedPolicy
from pyclosure.core.validation import (
    is_dense_rows,
    is_labeled_rows,
    validate_array,
    validate_dense_rows,
    validate_labeled_rows,
)
from pyclosure.graph.transitive_closure import floyd_warshall_closure_inplace
from pyclosure.graph.warshall import (
    close_dense_rows,
    close_labeled_rows,
    dense_rows_are_closed,
    labeled_rows_are_closed,
)

G = TypeVar("G")


def compute_closure(graph: G, *, on_unsupported: UnsupportedPolicy | None = None) -> G:
    """
    Compute the transitive closure of a directed graph in place.

    For every vertex k, then every source i, then every destination j, sets
    graph[i][j] when graph[i][k] and graph[k][j] are both set. Entries are
    only ever added, never cleared, and no vertex is ever added.

    Args:
        graph: Dense matrix (list of lists or 2-D numpy array), labeled
            adjacency (mapping of mappings), or a DenseMatrix /
            LabeledAdjacency. Modified in place.
        on_unsupported: What to do if graph is none of the above:
            - 'raise': raise UnsupportedGraphError
            - 'warn': return graph unchanged with an UnsupportedGraphWarning
            - 'ignore': return graph unchanged silently
            Defaults to the configured value (see pyclosure.config).

    Returns:
        The same graph object, now transitively closed

    Raises:
        MalformedGraphError: If a dense graph is not square or has jagged,
            immutable or shared rows, or a labeled graph has immutable or
            shared rows. Raised before any entry is modified.
        UnsupportedGraphError: If graph has an unsupported shape and the
            policy is 'raise'

    Complexity:
        Time: O(V^3) for both encodings
        Space: dense O(V^2) (the input itself), labeled O(entries in closure)

    Example:
        >>> graph = [[1, 0, 0, 0],
        ...          [0, 1, 1, 1],
        ...          [0, 1, 1, 0],
        ...          [1, 0, 1, 1]]
        >>> compute_closure(graph)
        [[1, 0, 0, 0], [1, 1, 1, 1], [1, 1, 1, 1], [1, 1, 1, 1]]

        >>> graph = {"one": {"one": 1},
        ...          "two": {"two": 1, "three": 1, "four": 1},
        ...          "three": {"two": 1, "three": 1},
        ...          "four": {"one": 1, "four": 1}}
        >>> compute_closure(graph)["three"].get("one")
        True
    """
    policy = validate_policy(
        get_config().on_unsupported if on_unsupported is None else on_unsupported
    )

    if isinstance(graph, (DenseMatrix, LabeledAdjacency)):
        graph.closure(inplace=True)
    elif isinstance(graph, np.ndarray):
        floyd_warshall_closure_inplace(graph)
    elif is_labeled_rows(graph):
        close_labeled_rows(graph)
    elif is_dense_rows(graph):
        close_dense_rows(graph)
    else:
        _handle_unsupported(graph, policy)

    return graph


def close_in_place(graph: Any) -> None:
    """
    Compute the transitive closure of graph in place, returning nothing.

    Unlike compute_closure, an unsupported graph always raises.

    Raises:
        MalformedGraphError: If the graph fails shape validation
        UnsupportedGraphError: If graph has an unsupported shape
    """
    compute_closure(graph, on_unsupported="raise")


def transitive_closure(graph: G) -> G:
    """
    Return the transitive closure of a copy of graph.

    The argument is left unchanged; the result has the same type and
    encoding (a list of lists stays a list of lists).

    Raises:
        MalformedGraphError: If the graph fails shape validation
        UnsupportedGraphError: If graph has an unsupported shape
    """
    if isinstance(graph, (DenseMatrix, LabeledAdjacency)):
        return graph.closure(inplace=False)
    if isinstance(graph, np.ndarray):
        return compute_closure(graph.copy(), on_unsupported="raise")
    # Validate before paying for the copy
    _validate_raw(graph)
    return compute_closure(copy.deepcopy(graph), on_unsupported="raise")


def is_transitively_closed(graph: Any) -> bool:
    """
    Check whether graph already equals its own transitive closure.

    True iff for all vertices i, k, j: i reaches k and k reaches j implies
    i reaches j. The graph is not modified.

    Raises:
        MalformedGraphError: If the graph fails shape validation
        UnsupportedGraphError: If graph has an unsupported shape
    """
    if isinstance(graph, (DenseMatrix, LabeledAdjacency)):
        return graph.is_closed()
    if isinstance(graph, np.ndarray):
        validate_array(graph)
        return bool(is_transitive_numba(np.ascontiguousarray(graph, dtype=np.bool_)))
    if is_labeled_rows(graph):
        validate_labeled_rows(graph, require_mutable=False)
        return labeled_rows_are_closed(graph)
    if is_dense_rows(graph):
        validate_dense_rows(graph, require_mutable=False)
        return dense_rows_are_closed(graph)
    raise _unsupported_error(graph)


def _validate_raw(graph: Any) -> None:
    if is_labeled_rows(graph):
        validate_labeled_rows(graph)
    elif is_dense_rows(graph):
        validate_dense_rows(graph)
    else:
        raise _unsupported_error(graph)


def _handle_unsupported(graph: Any, policy: UnsupportedPolicy) -> None:
    if policy == "raise":
        raise _unsupported_error(graph)
    if policy == "warn":
        warnings.warn(
            f"compute_closure received a {type(graph).__name__}, which is neither "
            f"a dense matrix nor a labeled adjacency; returning it unchanged. "
            f"Pass on_unsupported='raise' to make this an error.",
            UnsupportedGraphWarning,
            stacklevel=3,
        )


def _unsupported_error(graph: Any) -> UnsupportedGraphError:
    return UnsupportedGraphError(
        f"Unsupported graph representation: {type(graph).__name__}. Expected a "
        f"sequence of sequences, a 2-D numpy array, or a mapping of mappings."
    )
