"""Core exceptions and type aliases for PyClosure.

Graph representations and results live in ``pyclosure.core.graphs`` and
``pyclosure.core.result``; they are re-exported from ``pyclosure``.
"""

from pyclosure.core.exceptions import (
    PyClosureError,
    GraphValidationError,
    MalformedGraphError,
    UnknownVertexError,
    UnsupportedGraphError,
    UnsupportedGraphWarning,
)

__all__ = [
    # Exceptions
    "PyClosureError",
    "GraphValidationError",
    "MalformedGraphError",
    "UnknownVertexError",
    "UnsupportedGraphError",
    # Warnings
    "UnsupportedGraphWarning",
]
