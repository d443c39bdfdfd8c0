"""Custom exceptions and warnings for PyClosure.

This module provides a hierarchy of exceptions for specific error types,
all inheriting from ValueError so callers can keep catching ValueError.

Exception Hierarchy:
    PyClosureError (ValueError)
    ├── GraphValidationError
    │   ├── MalformedGraphError
    │   └── UnknownVertexError
    └── UnsupportedGraphError (also TypeError)

Warning Classes:
    UnsupportedGraphWarning (UserWarning)
"""

from __future__ import annotations


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class PyClosureError(ValueError):
    """Base exception for all PyClosure errors.

    Example:
        >>> try:
        ...     compute_closure([[1, 0], [1]])
        ... except PyClosureError as e:
        ...     print(f"PyClosure error: {e}")
    """

    pass


# =============================================================================
# GRAPH VALIDATION EXCEPTIONS
# =============================================================================


class GraphValidationError(PyClosureError):
    """Raised when a graph of a supported shape fails validation.

    Validation always runs before the closure loop starts, so a graph that
    triggers this error is left exactly as the caller passed it.
    """

    pass


class MalformedGraphError(GraphValidationError):
    """Raised when a graph has a supported shape but inconsistent contents.

    Common causes:
        - Dense matrix that is not square (row count != column count)
        - Jagged rows of different lengths
        - Rows or inner mappings that cannot be mutated in place
        - Numpy arrays that are not 2-D
        - Labeled adjacency whose inner keys name labels without a row

    Example:
        >>> compute_closure([[1, 0, 0], [0, 1]])
        MalformedGraphError: Row 1 has length 2, expected 3 (graph must be
        square)...
    """

    pass


class UnknownVertexError(GraphValidationError):
    """Raised when a query names a vertex outside the graph's vertex set.

    Only the typed representations raise this; the closure loop itself
    never looks up vertices it did not capture up front.

    Example:
        >>> LabeledAdjacency({"a": {"a": True}}).reaches("a", "z")
        UnknownVertexError: Unknown vertex 'z'...
    """

    pass


class UnsupportedGraphError(PyClosureError, TypeError):
    """Raised when an object is neither a dense matrix nor a labeled adjacency.

    Only raised under the "raise" policy (see ``pyclosure.config``); the
    default policy returns the object unchanged and issues an
    UnsupportedGraphWarning instead.
    """

    pass


# =============================================================================
# WARNINGS
# =============================================================================


class UnsupportedGraphWarning(UserWarning):
    """Warning for objects passed through unchanged by compute_closure.

    Emitted when ``on_unsupported='warn'`` (the default) and the argument is
    neither a sequence of sequences, a 2-D array, nor a mapping of mappings.

    Example:
        >>> import warnings
        >>> # Promote pass-through to an error
        >>> warnings.filterwarnings('error', category=UnsupportedGraphWarning)
    """

    pass
