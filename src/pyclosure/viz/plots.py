"""Plotting functions for reachability matrices."""

from __future__ import annotations

from typing import Any

import numpy as np

from pyclosure.core.graphs import DenseMatrix, as_graph


def plot_reachability_matrix(
    graph: Any,
    closure: bool = True,
    figsize: tuple[int, int] = (8, 8),
    ax: Any = None,
) -> tuple[Any, Any]:
    """
    Plot a graph's adjacency or reachability matrix as a heatmap.

    Cells added by the closure are drawn in a lighter shade than edges
    present in the input, so indirect reachability stands out.

    Args:
        graph: Any graph accepted by compute_closure, or a typed graph.
            Not modified.
        closure: If True, plot the transitive closure; otherwise the input
        figsize: Figure size
        ax: Optional matplotlib axes

    Returns:
        Tuple of (figure, axes)

    Example:
        >>> from pyclosure.viz import plot_reachability_matrix
        >>> fig, ax = plot_reachability_matrix([[1, 1, 0], [0, 1, 1], [0, 0, 1]])
        >>> fig.savefig("reachability.png")
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    typed = as_graph(graph)
    labels = [str(v) for v in typed.vertices]
    direct = _to_matrix(typed)

    if closure:
        reach = _to_matrix(typed.closure(inplace=False))
        # 1.0 = direct edge, 0.5 = reachable only through intermediates
        matrix = np.where(direct, 1.0, np.where(reach, 0.5, 0.0))
        title = "Transitive Closure"
    else:
        matrix = direct.astype(float)
        title = "Adjacency"

    im = ax.imshow(matrix, cmap="Blues", vmin=0.0, vmax=1.0, aspect="auto")
    plt.colorbar(im, ax=ax, label="Reachability")

    V = len(labels)
    ax.set_xticks(range(V))
    ax.set_yticks(range(V))
    ax.set_xticklabels(labels)
    ax.set_yticklabels(labels)

    ax.set_xlabel("Target j")
    ax.set_ylabel("Source i")
    ax.set_title(title)

    return fig, ax


def _to_matrix(typed: Any) -> np.ndarray:
    if isinstance(typed, DenseMatrix):
        return typed.adjacency.copy()
    index = {v: n for n, v in enumerate(typed.vertices)}
    matrix = np.zeros((len(index), len(index)), dtype=np.bool_)
    for src, dst in typed.edges():
        matrix[index[src], index[dst]] = True
    return matrix
