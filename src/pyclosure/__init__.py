"""
PyClosure: Transitive Closure of Directed Graphs.

Floyd-Warshall reachability for dense boolean matrices and sparse labeled
adjacency mappings.
"""

from pyclosure.closure import (
    compute_closure,
    close_in_place,
    transitive_closure,
    is_transitively_closed,
)
from pyclosure.analysis import analyze_closure
from pyclosure.config import ClosureConfig, get_config, set_config, config_context
from pyclosure.core.graphs import DenseMatrix, LabeledAdjacency, Graph, as_graph
from pyclosure.core.result import ClosureResult
from pyclosure.core.exceptions import (
    PyClosureError,
    GraphValidationError,
    MalformedGraphError,
    UnknownVertexError,
    UnsupportedGraphError,
    UnsupportedGraphWarning,
)
from pyclosure.graph.transitive_closure import floyd_warshall_transitive_closure

__version__ = "0.1.0"

__all__ = [
    # Closure
    "compute_closure",
    "close_in_place",
    "transitive_closure",
    "is_transitively_closed",
    "floyd_warshall_transitive_closure",
    # Graph representations
    "DenseMatrix",
    "LabeledAdjacency",
    "Graph",
    "as_graph",
    # Analysis
    "analyze_closure",
    "ClosureResult",
    # Configuration
    "ClosureConfig",
    "get_config",
    "set_config",
    "config_context",
    # Exceptions
    "PyClosureError",
    "GraphValidationError",
    "MalformedGraphError",
    "UnknownVertexError",
    "UnsupportedGraphError",
    # Warnings
    "UnsupportedGraphWarning",
]
