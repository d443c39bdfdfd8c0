"""Pytest fixtures for PyClosure tests."""

import numpy as np
import pytest

from pyclosure import config


@pytest.fixture(autouse=True)
def reset_config():
    """Restore library defaults after every test."""
    previous = config.get_config()
    yield
    config.set_config(
        on_unsupported=previous.on_unsupported,
        parallel_threshold=previous.parallel_threshold,
    )


@pytest.fixture
def dense_fixture() -> list[list[int]]:
    """
    Four vertices with self-loops seeded.

    1 -> 2, 1 -> 3, 2 -> 1, 3 -> 0, 3 -> 2. Vertex 0 only reaches itself;
    every other vertex reaches everything through 3 -> 0 and 2 -> 1.
    """
    return [
        [1, 0, 0, 0],
        [0, 1, 1, 1],
        [0, 1, 1, 0],
        [1, 0, 1, 1],
    ]


@pytest.fixture
def dense_fixture_closure() -> list[list[int]]:
    return [
        [1, 0, 0, 0],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
    ]


@pytest.fixture
def labeled_fixture() -> dict[str, dict[str, int]]:
    """Labeled version of a four-vertex graph with self-loops seeded."""
    return {
        "one": {"one": 1},
        "two": {"two": 1, "three": 1, "four": 1},
        "three": {"two": 1, "three": 1},
        "four": {"one": 1, "four": 1},
    }


@pytest.fixture
def labeled_fixture_reachable() -> dict[str, set[str]]:
    """Reachable set of every vertex of labeled_fixture after closure."""
    return {
        "one": {"one"},
        "two": {"one", "two", "three", "four"},
        "three": {"one", "two", "three", "four"},
        "four": {"one", "four"},
    }


@pytest.fixture
def chain_matrix() -> np.ndarray:
    """Path 0 -> 1 -> 2 -> 3 without self-loops."""
    adj = np.zeros((4, 4), dtype=bool)
    adj[0, 1] = adj[1, 2] = adj[2, 3] = True
    return adj


@pytest.fixture
def random_matrix() -> np.ndarray:
    """Sparse random 30 x 30 boolean adjacency (about 8% density)."""
    rng = np.random.default_rng(42)
    return rng.random((30, 30)) < 0.08
