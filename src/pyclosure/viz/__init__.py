"""Visualization utilities for transitive closure."""

__all__ = [
    "plot_reachability_matrix",
]


def plot_reachability_matrix(
    graph,
    closure: bool = True,
    figsize: tuple[int, int] = (8, 8),
    ax=None,
):
    """
    Plot a graph's adjacency or reachability matrix as a heatmap.

    Args:
        graph: Any graph accepted by compute_closure
        closure: If True, plot the transitive closure; otherwise the input
        figsize: Figure size
        ax: Optional matplotlib axes

    Returns:
        Tuple of (figure, axes)
    """
    from pyclosure.viz.plots import plot_reachability_matrix as _plot

    return _plot(graph, closure, figsize, ax)
