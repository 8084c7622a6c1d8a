"""
Exact matchers for the two Kuratowski graphs.

These are isomorphism tests against fixed-size targets, not subgraph or
minor tests. The planarity search applies them to reduced minors.
"""

from __future__ import annotations

from typing import Optional

from .graph import UGraph

K5 = "K5"
K33 = "K3,3"


def is_k5(graph: UGraph) -> bool:
    """
    Test whether graph is exactly the complete graph on 5 nodes.

    Five nodes, ten edges and degree four everywhere. Given the counts, the
    degree condition alone forces completeness.
    """
    if graph.node_count != 5:
        return False
    if graph.edge_count != 10:
        return False

    for node in graph.nodes:
        if len(graph.neighbors_of(node)) != 4:
            return False

    return True


def is_k33(graph: UGraph) -> bool:
    """
    Test whether graph is exactly the complete bipartite graph K3,3.

    The first node in sorted order fixes the bipartition: its neighbors form
    one side, everything else the other. Six nodes, nine edges, three
    neighbors for that first node and no edge inside either side.
    """
    if graph.node_count != 6:
        return False
    if graph.edge_count != 9:
        return False

    first = graph.nodes[0]
    other_side = graph.neighbors_of(first)
    if len(other_side) != 3:
        return False

    for edge in graph.edges:
        # exactly one endpoint on each side
        smaller_across = edge.smaller_node in other_side
        greater_across = edge.greater_node in other_side
        if smaller_across == greater_across:
            return False

    return True


def kuratowski_type(graph: UGraph) -> Optional[str]:
    """Return "K5" or "K3,3" if graph is exactly one of them, else None."""
    if is_k5(graph):
        return K5
    if is_k33(graph):
        return K33
    return None


__all__ = ["K5", "K33", "is_k5", "is_k33", "kuratowski_type"]
