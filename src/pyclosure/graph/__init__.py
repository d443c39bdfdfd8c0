"""Graph algorithms for transitive closure.

NetworkX conversions live in ``pyclosure.graph.nx_interop``.
"""

from pyclosure.graph.transitive_closure import (
    floyd_warshall_closure_inplace,
    floyd_warshall_transitive_closure,
    floyd_warshall_with_path_reconstruction,
    reconstruct_path,
)

__all__ = [
    "floyd_warshall_closure_inplace",
    "floyd_warshall_transitive_closure",
    "floyd_warshall_with_path_reconstruction",
    "reconstruct_path",
]
