"""Validated graph representations for transitive closure.

This module provides the two graph encodings PyClosure works on as a
tagged union, decided once at the API boundary:

    - DenseMatrix: V x V boolean matrix over the index range 0..V
    - LabeledAdjacency: label -> {label: True} sparse adjacency

Both validate their shape on construction, own their storage, and never
create entries as a side effect of a query.
"""

from __future__ import annotations

import copy as _copy
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from pyclosure._kernels import is_transitive_numba
from pyclosure.core.exceptions import (
    MalformedGraphError,
    UnknownVertexError,
    UnsupportedGraphError,
)
from pyclosure.core.validation import (
    is_dense_rows,
    is_labeled_rows,
    validate_array,
    validate_labeled_rows,
)
from pyclosure.graph.transitive_closure import floyd_warshall_closure_inplace
from pyclosure.graph.warshall import close_labeled_rows, labeled_rows_are_closed


@dataclass(eq=False)
class DenseMatrix:
    """
    Directed graph over vertices 0..V-1 stored as a V x V boolean matrix.

    adjacency[i, j] = True means there is an edge from i to j (or i == j if
    the caller seeded self-loops).

    Attributes:
        adjacency: V x V matrix of boolean-like values. Lists of lists and
            numpy arrays of any dtype are accepted and copied into an owned
            C-contiguous np.bool_ array.

    Properties:
        num_vertices: Number of vertices V
        num_edges: Number of True cells

    Example:
        >>> g = DenseMatrix([[1, 1, 0], [0, 1, 1], [0, 0, 1]])
        >>> g.closure().reaches(0, 2)
        True
    """

    adjacency: NDArray[np.bool_]

    def __post_init__(self) -> None:
        """Validate shape and copy into an owned boolean array."""
        if not isinstance(self.adjacency, np.ndarray):
            if not is_dense_rows(self.adjacency):
                raise UnsupportedGraphError(
                    f"DenseMatrix needs a sequence of rows or a 2-D array, "
                    f"got {type(self.adjacency).__name__}"
                )
            rows = self.adjacency
            n_vertices = len(rows)
            for i, row in enumerate(rows):
                if len(row) != n_vertices:
                    raise MalformedGraphError(
                        f"Row {i} has length {len(row)}, expected {n_vertices} "
                        f"(graph must be square)"
                    )
            self.adjacency = np.zeros((n_vertices, n_vertices), dtype=np.bool_)
            for i, row in enumerate(rows):
                self.adjacency[i, :] = [bool(cell) for cell in row]
        else:
            validate_array(self.adjacency)
            self.adjacency = np.array(self.adjacency, dtype=np.bool_, order="C")

    # ---- construction ------------------------------------------------------

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[tuple[int, int]]
    ) -> DenseMatrix:
        """
        Build a graph on 0..num_vertices-1 from (source, target) pairs.

        Raises:
            UnknownVertexError: If an edge endpoint is out of range
        """
        if num_vertices < 0:
            raise MalformedGraphError(
                f"num_vertices must be non-negative, got {num_vertices}"
            )
        graph = cls(np.zeros((num_vertices, num_vertices), dtype=np.bool_))
        for src, dst in edges:
            graph._check_vertex(src)
            graph._check_vertex(dst)
            graph.adjacency[src, dst] = True
        return graph

    def with_self_loops(self) -> DenseMatrix:
        """Return a copy with adjacency[i, i] = True for every vertex."""
        result = self.copy()
        np.fill_diagonal(result.adjacency, True)
        return result

    def copy(self) -> DenseMatrix:
        return DenseMatrix(self.adjacency.copy())

    # ---- closure -----------------------------------------------------------

    def closure(self, inplace: bool = False) -> DenseMatrix:
        """
        Compute the transitive closure.

        Args:
            inplace: If True, close this graph and return it; otherwise close
                a copy and leave this graph unchanged

        Returns:
            The closed graph
        """
        target = self if inplace else self.copy()
        floyd_warshall_closure_inplace(target.adjacency)
        return target

    def is_closed(self) -> bool:
        """True if the graph already equals its transitive closure."""
        return bool(is_transitive_numba(self.adjacency))

    # ---- queries -----------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return int(self.adjacency.shape[0])

    @property
    def num_edges(self) -> int:
        return int(np.count_nonzero(self.adjacency))

    @property
    def vertices(self) -> tuple[int, ...]:
        return tuple(range(self.num_vertices))

    def reaches(self, source: int, target: int) -> bool:
        """True if adjacency[source, target] is set."""
        self._check_vertex(source)
        self._check_vertex(target)
        return bool(self.adjacency[source, target])

    def successors(self, vertex: int) -> list[int]:
        self._check_vertex(vertex)
        return np.flatnonzero(self.adjacency[vertex]).tolist()

    def edges(self) -> Iterator[tuple[int, int]]:
        for src, dst in zip(*np.nonzero(self.adjacency)):
            yield int(src), int(dst)

    def to_rows(self) -> list[list[int]]:
        """Return the matrix as a list of lists of 0/1."""
        return self.adjacency.astype(np.int64).tolist()

    def _check_vertex(self, vertex: Any) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, (int, np.integer)):
            raise UnknownVertexError(
                f"Dense vertices are integer indices, got {vertex!r}"
            )
        if not 0 <= vertex < self.num_vertices:
            raise UnknownVertexError(
                f"Unknown vertex {vertex!r}: graph has vertices 0..{self.num_vertices - 1}"
            )

    # ---- dunder ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return np.array_equal(self.adjacency, other.adjacency)

    def __len__(self) -> int:
        return self.num_vertices

    def __repr__(self) -> str:
        return f"DenseMatrix(vertices={self.num_vertices}, edges={self.num_edges})"


@dataclass(eq=False)
class LabeledAdjacency:
    """
    Directed graph over arbitrary hashable labels, stored sparsely.

    adjacency[u][v] = True means there is an edge from u to v. A missing
    inner key means no edge. Only pairs that are edges are stored, so space
    is proportional to the number of edges.

    Attributes:
        adjacency: Mapping from label to a mapping of successor labels to a
            presence marker. Copied on construction; entries with a falsy
            marker are dropped. Every successor label must also be a key.

    Properties:
        vertices: Tuple of labels, captured at construction
        num_vertices: Number of vertices
        num_edges: Number of stored entries

    Example:
        >>> g = LabeledAdjacency.from_edges([("a", "b"), ("b", "c")])
        >>> g.closure().reaches("a", "c")
        True
    """

    adjacency: dict[Hashable, dict[Hashable, bool]]
    vertices: tuple[Hashable, ...] = field(init=False)

    def __post_init__(self) -> None:
        """Validate the label universe and copy into owned dicts."""
        if not is_labeled_rows(self.adjacency):
            raise UnsupportedGraphError(
                f"LabeledAdjacency needs a mapping of mappings, "
                f"got {type(self.adjacency).__name__}"
            )
        validate_labeled_rows(
            self.adjacency, require_mutable=False, require_known_targets=True
        )
        self.adjacency = {
            label: {target: True for target, marker in row.items() if marker}
            for label, row in self.adjacency.items()
        }
        self.vertices = tuple(self.adjacency)

    # ---- construction ------------------------------------------------------

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[Hashable, Hashable]],
        vertices: Iterable[Hashable] = (),
    ) -> LabeledAdjacency:
        """
        Build a graph from (source, target) pairs.

        Every endpoint gets a row, so the label universe is consistent.
        Vertices listed in *vertices* are added even if no edge touches them.
        """
        rows: dict[Hashable, dict[Hashable, bool]] = {v: {} for v in vertices}
        for src, dst in edges:
            rows.setdefault(src, {})[dst] = True
            rows.setdefault(dst, {})
        return cls(rows)

    def with_self_loops(self) -> LabeledAdjacency:
        """Return a copy with adjacency[v][v] = True for every vertex."""
        result = self.copy()
        for label, row in result.adjacency.items():
            row[label] = True
        return result

    def copy(self) -> LabeledAdjacency:
        return LabeledAdjacency(_copy.deepcopy(self.adjacency))

    # ---- closure -----------------------------------------------------------

    def closure(self, inplace: bool = False) -> LabeledAdjacency:
        """
        Compute the transitive closure.

        Args:
            inplace: If True, close this graph and return it; otherwise close
                a copy and leave this graph unchanged

        Returns:
            The closed graph
        """
        target = self if inplace else self.copy()
        close_labeled_rows(target.adjacency)
        return target

    def is_closed(self) -> bool:
        """True if the graph already equals its transitive closure."""
        return labeled_rows_are_closed(self.adjacency)

    # ---- queries -----------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return sum(len(row) for row in self.adjacency.values())

    def lookup(self, source: Hashable, target: Hashable) -> bool | None:
        """
        Probe an entry without creating anything.

        Returns:
            None if *source* has no row, otherwise whether the edge exists
        """
        row = self.adjacency.get(source)
        if row is None:
            return None
        return bool(row.get(target, False))

    def reaches(self, source: Hashable, target: Hashable) -> bool:
        """True if the edge source -> target is stored."""
        self._check_vertex(source)
        self._check_vertex(target)
        return bool(self.lookup(source, target))

    def successors(self, vertex: Hashable) -> list[Hashable]:
        self._check_vertex(vertex)
        return list(self.adjacency[vertex])

    def edges(self) -> Iterator[tuple[Hashable, Hashable]]:
        for src, row in self.adjacency.items():
            for dst in row:
                yield src, dst

    def to_dict(self) -> dict[Hashable, dict[Hashable, bool]]:
        """Return a deep copy of the adjacency mapping."""
        return {label: dict(row) for label, row in self.adjacency.items()}

    def _check_vertex(self, vertex: Hashable) -> None:
        if vertex not in self.adjacency:
            raise UnknownVertexError(f"Unknown vertex {vertex!r}")

    # ---- dunder ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabeledAdjacency):
            return NotImplemented
        return self.adjacency == other.adjacency

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    def __len__(self) -> int:
        return self.num_vertices

    def __repr__(self) -> str:
        return (
            f"LabeledAdjacency(vertices={self.num_vertices}, edges={self.num_edges})"
        )


Graph = Union[DenseMatrix, LabeledAdjacency]


def as_graph(obj: Any) -> Graph:
    """
    Convert a raw graph into its typed representation.

    Decides the representation once: 2-D arrays and sequences of rows become
    DenseMatrix, mappings of mappings become LabeledAdjacency. Typed graphs
    are returned unchanged. The raw object is copied, never modified.

    Raises:
        UnsupportedGraphError: If obj is neither shape
        MalformedGraphError: If obj has a supported shape but bad contents
    """
    if isinstance(obj, (DenseMatrix, LabeledAdjacency)):
        return obj
    if isinstance(obj, np.ndarray) or is_dense_rows(obj):
        return DenseMatrix(obj)
    if is_labeled_rows(obj):
        return LabeledAdjacency(obj)
    raise UnsupportedGraphError(
        f"Unsupported graph representation: {type(obj).__name__}. Expected a "
        f"sequence of sequences, a 2-D numpy array, or a mapping of mappings."
    )
