"""Tests for analyze_closure and ClosureResult."""

import copy
import time

import numpy as np
import pytest

from pyclosure import (
    ClosureResult,
    DenseMatrix,
    LabeledAdjacency,
    analyze_closure,
    compute_closure,
)


class TestAnalyzeDense:
    def test_fixture(self, dense_fixture, dense_fixture_closure):
        result = analyze_closure(dense_fixture)

        assert isinstance(result, ClosureResult)
        assert result.representation == "dense"
        assert result.num_vertices == 4
        assert result.num_input_edges == 9
        assert result.num_closure_edges == 13
        assert sorted(result.new_edges) == [(1, 0), (2, 0), (2, 3), (3, 1)]
        assert result.closure.to_rows() == dense_fixture_closure

    def test_input_untouched(self, dense_fixture):
        before = copy.deepcopy(dense_fixture)
        analyze_closure(dense_fixture)
        assert dense_fixture == before

    def test_typed_input_untouched(self, chain_matrix):
        g = DenseMatrix(chain_matrix)
        result = analyze_closure(g)

        assert result.closure is not g
        assert not g.reaches(0, 3)
        assert result.closure.reaches(0, 3)

    def test_already_closed(self, dense_fixture_closure):
        result = analyze_closure(dense_fixture_closure)

        assert result.was_closed
        assert result.num_new_edges == 0

    def test_strongly_connected(self):
        result = analyze_closure([[0, 1, 0], [0, 0, 1], [1, 0, 0]])

        assert result.is_strongly_connected
        assert result.density() == 1.0

    def test_not_strongly_connected(self, dense_fixture):
        assert not analyze_closure(dense_fixture).is_strongly_connected

    def test_empty(self):
        result = analyze_closure([])

        assert result.num_vertices == 0
        assert result.density() == 0.0
        assert not result.is_strongly_connected


class TestAnalyzeLabeled:
    def test_fixture(self, labeled_fixture):
        result = analyze_closure(labeled_fixture)

        assert result.representation == "labeled"
        assert isinstance(result.closure, LabeledAdjacency)
        assert ("three", "one") in result.new_edges
        assert ("one", "two") not in result.new_edges
        assert result.num_closure_edges == 11

    def test_chain_new_edges(self):
        result = analyze_closure({"a": {"b": 1}, "b": {"c": 1}, "c": {}})
        assert result.new_edges == [("a", "c")]


class TestScaling:
    """The Warshall loop does V^3 work regardless of density."""

    @pytest.mark.parametrize("n_vertices", [5, 10, 20])
    def test_operations_cubic(self, n_vertices):
        result = analyze_closure(np.zeros((n_vertices, n_vertices), dtype=bool))
        assert result.operations == n_vertices**3

    def test_doubling_vertices_multiplies_work_by_eight(self):
        rng = np.random.default_rng(0)
        small = analyze_closure(rng.random((16, 16)) < 0.1)
        large = analyze_closure(rng.random((32, 32)) < 0.1)

        assert large.operations == 8 * small.operations

    def test_labeled_operations(self, labeled_fixture):
        assert analyze_closure(labeled_fixture).operations == 4**3

    @pytest.mark.slow
    def test_pure_python_time_grows_superquadratically(self):
        """Doubling V in the list-of-lists loop costs clearly more than 4x."""

        def timed(n: int) -> float:
            rows = [[1] * n for _ in range(n)]
            start = time.perf_counter()
            compute_closure(rows)
            return time.perf_counter() - start

        timed(20)  # warm up
        t_small = min(timed(60) for _ in range(3))
        t_large = min(timed(120) for _ in range(3))

        assert t_large / t_small > 4.0


class TestClosureResultReporting:
    def test_summary(self, dense_fixture):
        text = analyze_closure(dense_fixture).summary()

        assert "TRANSITIVE CLOSURE REPORT" in text
        assert "EDGES ADDED" in text
        assert "New Edges" in text
        assert "Computation Time" in text

    def test_summary_truncates_edge_list(self):
        n = 8
        rows = [[1 if j == i + 1 else 0 for j in range(n)] for i in range(n)]
        text = analyze_closure(rows).summary()

        assert "more edge(s)" in text

    def test_to_dict(self, labeled_fixture):
        data = analyze_closure(labeled_fixture).to_dict()

        assert data["representation"] == "labeled"
        assert data["num_vertices"] == 4
        assert data["num_new_edges"] == len(data["new_edges"])
        assert ["three", "one"] in data["new_edges"]
        assert 0.0 <= data["density"] <= 1.0

    def test_repr(self, dense_fixture):
        text = repr(analyze_closure(dense_fixture))

        assert text.startswith("ClosureResult(representation='dense'")
        assert "new_edges=4" in text

    def test_frozen(self, dense_fixture):
        result = analyze_closure(dense_fixture)
        with pytest.raises(AttributeError):
            result.num_vertices = 10
