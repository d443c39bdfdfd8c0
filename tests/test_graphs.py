"""Tests for the DenseMatrix and LabeledAdjacency representations."""

import numpy as np
import pytest

from pyclosure import (
    DenseMatrix,
    LabeledAdjacency,
    MalformedGraphError,
    UnknownVertexError,
    UnsupportedGraphError,
    as_graph,
    compute_closure,
    transitive_closure,
)


class TestDenseMatrix:
    """Tests for the dense representation."""

    def test_from_rows(self, dense_fixture):
        g = DenseMatrix(dense_fixture)

        assert g.num_vertices == 4
        assert g.num_edges == 9
        assert g.adjacency.dtype == np.bool_

    def test_owns_its_storage(self, dense_fixture):
        """Construction copies, so the caller's rows are never touched."""
        g = DenseMatrix(dense_fixture)
        g.closure(inplace=True)

        assert dense_fixture[1][0] == 0

    def test_closure_copy(self, dense_fixture, dense_fixture_closure):
        g = DenseMatrix(dense_fixture)
        closed = g.closure()

        assert closed is not g
        assert closed.to_rows() == dense_fixture_closure
        assert g.to_rows() == dense_fixture

    def test_closure_inplace(self, dense_fixture, dense_fixture_closure):
        g = DenseMatrix(dense_fixture)
        assert g.closure(inplace=True) is g
        assert g.to_rows() == dense_fixture_closure

    def test_compute_closure_accepts_typed(self, dense_fixture_closure, dense_fixture):
        g = DenseMatrix(dense_fixture)
        assert compute_closure(g) is g
        assert g.to_rows() == dense_fixture_closure

    def test_from_edges(self):
        g = DenseMatrix.from_edges(3, [(0, 1), (1, 2)])

        assert g.reaches(0, 1)
        assert not g.reaches(0, 2)
        assert g.closure().reaches(0, 2)

    def test_from_edges_out_of_range(self):
        with pytest.raises(UnknownVertexError):
            DenseMatrix.from_edges(2, [(0, 5)])

    def test_with_self_loops(self):
        g = DenseMatrix.from_edges(3, [(0, 1)])
        looped = g.with_self_loops()

        assert all(looped.reaches(v, v) for v in looped.vertices)
        assert not g.reaches(0, 0)

    def test_successors_and_edges(self, chain_matrix):
        g = DenseMatrix(chain_matrix)

        assert g.successors(1) == [2]
        assert list(g.edges()) == [(0, 1), (1, 2), (2, 3)]

    def test_reaches_unknown_vertex(self, chain_matrix):
        g = DenseMatrix(chain_matrix)
        with pytest.raises(UnknownVertexError):
            g.reaches(0, 4)
        with pytest.raises(UnknownVertexError):
            g.reaches("a", 0)

    def test_is_closed(self, chain_matrix):
        g = DenseMatrix(chain_matrix)
        assert not g.is_closed()
        assert g.closure().is_closed()

    def test_non_bool_array_converted(self):
        g = DenseMatrix(np.array([[0, 2], [0, 0]]))
        assert g.adjacency.dtype == np.bool_
        assert g.reaches(0, 1)

    def test_jagged_rejected(self):
        with pytest.raises(MalformedGraphError):
            DenseMatrix([[0, 1], [0]])

    def test_wrong_type_rejected(self):
        with pytest.raises(UnsupportedGraphError):
            DenseMatrix({"a": {}})

    def test_equality(self, chain_matrix):
        assert DenseMatrix(chain_matrix) == DenseMatrix(chain_matrix.astype(int))
        assert DenseMatrix(chain_matrix) != DenseMatrix(np.eye(4, dtype=bool))

    def test_repr(self, chain_matrix):
        assert repr(DenseMatrix(chain_matrix)) == "DenseMatrix(vertices=4, edges=3)"


class TestLabeledAdjacency:
    """Tests for the labeled representation."""

    def test_construction(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)

        assert g.vertices == ("one", "two", "three", "four")
        assert g.num_edges == 8

    def test_falsy_markers_dropped(self):
        g = LabeledAdjacency({"a": {"a": 0, "b": 1}, "b": {}})
        assert g.to_dict() == {"a": {"b": True}, "b": {}}

    def test_closure_copy(self, labeled_fixture, labeled_fixture_reachable):
        g = LabeledAdjacency(labeled_fixture)
        closed = g.closure()

        for label, reachable in labeled_fixture_reachable.items():
            assert set(closed.successors(label)) == reachable
        assert not g.reaches("three", "one")

    def test_lookup_does_not_insert(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)

        assert g.lookup("missing", "one") is None
        assert g.lookup("one", "two") is False
        assert g.lookup("two", "three") is True
        assert "missing" not in g
        assert "two" not in g.adjacency["one"]

    def test_reaches_unknown_vertex(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)
        with pytest.raises(UnknownVertexError, match="'five'"):
            g.reaches("one", "five")

    def test_from_edges_adds_rows_for_targets(self):
        g = LabeledAdjacency.from_edges([("a", "b"), ("b", "c")], vertices=["z"])

        assert set(g.vertices) == {"a", "b", "c", "z"}
        assert g.successors("c") == []
        assert g.closure().reaches("a", "c")
        assert g.closure().successors("z") == []

    def test_dangling_rejected(self):
        with pytest.raises(MalformedGraphError):
            LabeledAdjacency({"a": {"b": True}})

    def test_immutable_rows_accepted(self):
        """The typed form copies rows, so read-only mappings are fine."""
        from types import MappingProxyType

        g = LabeledAdjacency({"a": MappingProxyType({"b": 1}), "b": {}})
        assert g.reaches("a", "b")

    def test_with_self_loops(self):
        g = LabeledAdjacency.from_edges([(1, 2)]).with_self_loops()
        assert g.reaches(1, 1) and g.reaches(2, 2)

    def test_non_string_labels(self):
        g = LabeledAdjacency.from_edges([((0, 0), (0, 1)), ((0, 1), (1, 1))])
        assert g.closure().reaches((0, 0), (1, 1))

    def test_vertex_set_fixed_by_closure(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)
        closed = g.closure(inplace=True)

        assert closed.vertices == ("one", "two", "three", "four")
        assert set(closed.adjacency) == set(closed.vertices)

    def test_transitive_closure_typed(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)
        closed = transitive_closure(g)

        assert closed is not g
        assert closed.reaches("three", "one")
        assert not g.reaches("three", "one")

    def test_equality_and_repr(self):
        a = LabeledAdjacency.from_edges([("x", "y")])
        b = LabeledAdjacency({"x": {"y": 1}, "y": {}})

        assert a == b
        assert repr(a) == "LabeledAdjacency(vertices=2, edges=1)"


class TestAsGraph:
    def test_dense_rows(self, dense_fixture):
        assert isinstance(as_graph(dense_fixture), DenseMatrix)

    def test_numpy(self, chain_matrix):
        assert isinstance(as_graph(chain_matrix), DenseMatrix)

    def test_labeled(self, labeled_fixture):
        assert isinstance(as_graph(labeled_fixture), LabeledAdjacency)

    def test_typed_passthrough(self, labeled_fixture):
        g = LabeledAdjacency(labeled_fixture)
        assert as_graph(g) is g

    def test_unsupported(self):
        with pytest.raises(UnsupportedGraphError):
            as_graph(42)
