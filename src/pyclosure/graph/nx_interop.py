"""Conversion between PyClosure graphs and NetworkX directed graphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pyclosure.core.graphs import LabeledAdjacency, as_graph

if TYPE_CHECKING:
    import networkx as nx


def to_networkx(graph: Any) -> nx.DiGraph:
    """
    Build a NetworkX DiGraph with one node per vertex and one edge per entry.

    Dense graphs use integer nodes 0..V-1; labeled graphs use their labels.
    Isolated vertices are kept as nodes without edges.

    Args:
        graph: Any graph accepted by compute_closure, or a typed graph

    Returns:
        NetworkX DiGraph (self-loops included where set)

    Example:
        >>> G = to_networkx([[0, 1], [0, 0]])
        >>> list(G.edges())
        [(0, 1)]
    """
    import networkx as nx

    typed = as_graph(graph)
    G = nx.DiGraph()
    G.add_nodes_from(typed.vertices)
    G.add_edges_from(typed.edges())
    return G


def from_networkx(G: nx.DiGraph) -> LabeledAdjacency:
    """
    Build a LabeledAdjacency from the nodes and edges of a NetworkX graph.

    Edge attributes are dropped. Undirected graphs produce an entry in
    each direction.
    """
    return LabeledAdjacency.from_edges(G.edges(), vertices=G.nodes())
