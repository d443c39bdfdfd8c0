"""Floyd-Warshall algorithm for transitive closure of numpy matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyclosure._kernels import warshall_closure_parallel, warshall_closure_serial
from pyclosure.config import get_config
from pyclosure.core.validation import validate_array


def floyd_warshall_transitive_closure(
    adjacency: NDArray,
) -> NDArray[np.bool_]:
    """
    Compute transitive closure using Floyd-Warshall algorithm (Numba JIT).

    If adjacency[i,j] means "there is an edge from i to j", then
    result[i,j] means "there is a path of one or more edges from i to j".
    The diagonal is not forced to True: result[i,i] is True only if it was
    set on input or i lies on a cycle.

    The input is not modified.

    Args:
        adjacency: V x V matrix of boolean-like values where a nonzero
            adjacency[i,j] means there is a direct edge from i to j

    Returns:
        V x V boolean transitive closure matrix

    Raises:
        MalformedGraphError: If adjacency is not a square 2-D matrix

    Complexity:
        Time: O(V^3), parallelized across cores for large V
        Space: O(V^2)

    Example:
        >>> import numpy as np
        >>> # A -> B -> C
        >>> adj = np.array([
        ...     [False, True, False],
        ...     [False, False, True],
        ...     [False, False, False]
        ... ])
        >>> closure = floyd_warshall_transitive_closure(adj)
        >>> closure[0, 2]  # A reaches C through B
        True
    """
    adjacency = np.asarray(adjacency)
    validate_array(adjacency)

    # Fresh contiguous boolean array for Numba
    closure = np.array(adjacency, dtype=np.bool_, order="C")
    _run_kernel(closure)
    return closure


def floyd_warshall_closure_inplace(adjacency: np.ndarray) -> np.ndarray:
    """
    Close a numpy adjacency matrix in place and return it.

    Boolean C-contiguous arrays are updated directly by the kernel. Other
    dtypes are closed on a boolean copy and newly reachable cells are set
    to 1 in the caller's array; cells that were already nonzero keep their
    value.

    Args:
        adjacency: V x V numpy array, modified in place

    Returns:
        The same array object

    Raises:
        MalformedGraphError: If adjacency is not a square 2-D matrix
    """
    validate_array(adjacency, require_writeable=True)

    if adjacency.dtype == np.bool_ and adjacency.flags.c_contiguous:
        _run_kernel(adjacency)
        return adjacency

    present = adjacency != 0
    # Separate buffer: the kernel must not close `present` itself
    closure = np.array(present, dtype=np.bool_, order="C", copy=True)
    _run_kernel(closure)
    adjacency[closure & ~present] = 1
    return adjacency


def _run_kernel(closure: NDArray[np.bool_]) -> None:
    # Use serial for small matrices (less threading overhead)
    # Use parallel for large matrices (better scaling)
    if closure.shape[0] < get_config().parallel_threshold:
        warshall_closure_serial(closure)
    else:
        warshall_closure_parallel(closure)


def floyd_warshall_with_path_reconstruction(
    adjacency: NDArray,
) -> tuple[NDArray[np.bool_], NDArray[np.int64]]:
    """
    Compute transitive closure with path reconstruction capability.

    In addition to the closure matrix, returns a "next" matrix that
    allows reconstructing a witness path between any two vertices.

    Args:
        adjacency: V x V matrix of boolean-like values

    Returns:
        Tuple of:
        - closure: V x V boolean transitive closure matrix
        - next_node: V x V matrix where next_node[i,j] is the vertex after i
          on a path from i to j (-1 if no path exists)

    Example:
        >>> closure, next_node = floyd_warshall_with_path_reconstruction(adj)
        >>> reconstruct_path(next_node, 0, 2)
        [0, 1, 2]
    """
    adjacency = np.asarray(adjacency)
    validate_array(adjacency)

    V = adjacency.shape[0]
    closure = np.array(adjacency, dtype=np.bool_)

    # next_node[i,j] = j if direct edge exists, -1 otherwise
    next_node = np.where(closure, np.arange(V, dtype=np.int64)[np.newaxis, :], -1)
    next_node = next_node.astype(np.int64)

    # Floyd-Warshall with path tracking
    for k in range(V):
        for i in range(V):
            if not closure[i, k]:
                continue
            for j in range(V):
                if not closure[i, j] and closure[k, j]:
                    closure[i, j] = True
                    next_node[i, j] = next_node[i, k]

    return closure, next_node


def reconstruct_path(
    next_node: NDArray[np.int64], start: int, end: int
) -> list[int] | None:
    """
    Reconstruct path from start to end using the next_node matrix.

    When start == end the path is the cycle through start, e.g.
    [start, v, start], or [start, start] for a self-loop.

    Args:
        next_node: Matrix from floyd_warshall_with_path_reconstruction
        start: Starting vertex index
        end: Ending vertex index

    Returns:
        List of vertex indices forming the path, or None if no path exists
    """
    if next_node[start, end] == -1:
        return None

    path = [start]
    current = start
    while True:
        current = int(next_node[current, end])
        if current == -1:
            return None
        path.append(current)
        if current == end:
            return path
        if len(path) > next_node.shape[0]:
            # Safety check to prevent infinite loops
            return None
