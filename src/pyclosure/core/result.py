"""Result dataclasses for transitive closure analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pyclosure.core.graphs import Graph
from pyclosure.core.mixins import ResultSummaryMixin
from pyclosure.core.types import Edge


@dataclass(frozen=True)
class ClosureResult(ResultSummaryMixin):
    """
    Result of a transitive closure computation.

    Attributes:
        representation: 'dense' for index-based graphs, 'labeled' for
            label-keyed graphs
        num_vertices: Number of vertices V
        num_input_edges: Entries set before the closure
        num_closure_edges: Entries set after the closure
        new_edges: (source, target) pairs that became reachable
        operations: Size of the (k, i, j) iteration space of the Warshall
            loop, V^3
        is_strongly_connected: True if every vertex reaches every vertex
        closure: The closed graph (a copy; the analyzed graph is unchanged)
        computation_time_ms: Time taken to compute result in milliseconds
    """

    representation: Literal["dense", "labeled"]
    num_vertices: int
    num_input_edges: int
    num_closure_edges: int
    new_edges: list[Edge]
    operations: int
    is_strongly_connected: bool
    closure: Graph
    computation_time_ms: float

    @property
    def num_new_edges(self) -> int:
        """Number of entries added by the closure."""
        return len(self.new_edges)

    @property
    def was_closed(self) -> bool:
        """True if the input was already transitively closed."""
        return not self.new_edges

    def density(self) -> float:
        """Fraction of the V^2 ordered pairs that are reachable after closure."""
        if self.num_vertices == 0:
            return 0.0
        return self.num_closure_edges / self.num_vertices**2

    def summary(self) -> str:
        """Return human-readable summary report."""
        lines = [self._format_header("TRANSITIVE CLOSURE REPORT")]

        status = "ALREADY CLOSED" if self.was_closed else "EDGES ADDED"
        lines.append(f"\nStatus: {status}")

        lines.append(self._format_section("Metrics"))
        lines.append(self._format_metric("Representation", self.representation))
        lines.append(self._format_metric("Vertices", self.num_vertices))
        lines.append(self._format_metric("Input Edges", self.num_input_edges))
        lines.append(self._format_metric("Closure Edges", self.num_closure_edges))
        lines.append(self._format_metric("New Edges", self.num_new_edges))
        lines.append(self._format_metric("Reachability Density", self.density()))
        lines.append(self._format_metric("Strongly Connected", self.is_strongly_connected))
        lines.append(self._format_metric("Operations", self.operations))

        if self.new_edges:
            lines.append(self._format_section("New Edges"))
            edges = [f"{src!r} -> {dst!r}" for src, dst in self.new_edges]
            lines.append(self._format_list(edges, max_items=5, item_name="edge"))

        lines.append(self._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "representation": self.representation,
            "num_vertices": self.num_vertices,
            "num_input_edges": self.num_input_edges,
            "num_closure_edges": self.num_closure_edges,
            "num_new_edges": self.num_new_edges,
            "new_edges": [list(e) for e in self.new_edges],
            "operations": self.operations,
            "is_strongly_connected": self.is_strongly_connected,
            "density": self.density(),
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        return (
            f"ClosureResult(representation={self.representation!r}, "
            f"vertices={self.num_vertices}, new_edges={self.num_new_edges}, "
            f"time={self.computation_time_ms:.2f}ms)"
        )
