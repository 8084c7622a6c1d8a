"""
Graph minor operations.

Every function here returns a new UGraph and leaves its input untouched, so
search branches built from the same graph never share state.

Provided operations:
- delete_edge / delete_node / contract_edge: the three minor steps
- remove_self_loops / remove_isolated_nodes / prune: one-off cleanup
- reduce_degree: drop nodes of degree <= 1 and smooth nodes of degree 2
- biconnected_blocks: split a graph into its biconnected components
- single_step_minors: every minor one step away from a graph
"""

from __future__ import annotations

import heapq
from enum import Enum
from typing import Collection, Iterator, Optional, Union

from .graph import UGraph
from .types import Node, UEdge

# (survivor, absorbed) pair recorded for each contraction
Merge = tuple[Node, Node]


class MinorOperation(Enum):
    """The three ways of taking a one-step minor."""

    DELETE_EDGE = "delete_edge"
    DELETE_NODE = "delete_node"
    CONTRACT_EDGE = "contract_edge"


# =============================================================================
# Single steps
# =============================================================================


def delete_edge(graph: UGraph, edge: UEdge) -> UGraph:
    """Copy of graph without edge."""
    minor = graph.copy()
    minor.remove_edge(edge)
    return minor


def delete_node(graph: UGraph, node: Node) -> UGraph:
    """Copy of graph without node and its incident edges."""
    minor = graph.copy()
    minor.remove_node(node)
    return minor


def contract_edge(graph: UGraph, edge: UEdge) -> Optional[UGraph]:
    """
    Merge the endpoints of edge into one node.

    The smaller endpoint survives and takes over every edge of the greater
    one. The contracted edge disappears, parallel edges collapse into one and
    no self-loop is created. Contracting a self-loop just deletes it.

    Returns:
        The contracted graph, or None if edge is not in graph.
    """
    if edge not in graph:
        return None
    minor = graph.copy()
    minor.remove_edge(edge)
    if edge.is_loop():
        return minor

    _merge_into(minor, edge.smaller_node, edge.greater_node)
    return minor


def _merge_into(graph: UGraph, survivor: Node, absorbed: Node) -> None:
    """Move every edge of absorbed onto survivor, in place, then drop absorbed."""
    for other in graph.neighbors_of(absorbed):
        graph.remove_edge(UEdge(absorbed, other))
        if other != survivor and other != absorbed:
            # already-present edges are rejected, which collapses parallels
            graph.add_edge(UEdge(survivor, other))
    graph.remove_node(absorbed)


def single_step_minors(
    graph: UGraph,
    operations: Collection[MinorOperation] = tuple(MinorOperation),
) -> Iterator[tuple[MinorOperation, Union[Node, UEdge], UGraph]]:
    """
    Yield every minor one operation away from graph.

    Order is deterministic: contractions, then node deletions, then edge
    deletions, each in ascending order of their argument. Contraction and
    deletion are kept as separate operations since they reach different
    minors.

    Args:
        graph: Graph to take minors of
        operations: Which operations to apply (default: all three)

    Yields:
        (operation, argument, minor) triples.
    """
    if MinorOperation.CONTRACT_EDGE in operations:
        for edge in graph.edges:
            contracted = contract_edge(graph, edge)
            if contracted is not None:
                yield MinorOperation.CONTRACT_EDGE, edge, contracted
    if MinorOperation.DELETE_NODE in operations:
        for node in graph.nodes:
            yield MinorOperation.DELETE_NODE, node, delete_node(graph, node)
    if MinorOperation.DELETE_EDGE not in operations:
        return
    for edge in graph.edges:
        yield MinorOperation.DELETE_EDGE, edge, delete_edge(graph, edge)


# =============================================================================
# Cleanup and reduction
# =============================================================================


def remove_self_loops(graph: UGraph) -> UGraph:
    minor = graph.copy()
    for edge in graph.edges:
        if edge.is_loop():
            minor.remove_edge(edge)
    return minor


def remove_isolated_nodes(graph: UGraph) -> UGraph:
    """Copy of graph without nodes that have no incident edge."""
    minor = graph.copy()
    touched: set[Node] = set()
    for edge in graph.edges:
        touched.update(edge.nodes())
    for node in graph.nodes:
        if node not in touched:
            minor.remove_node(node)
    return minor


def prune(graph: UGraph) -> UGraph:
    """Remove self-loops, then the nodes left without any edge."""
    return remove_isolated_nodes(remove_self_loops(graph))


def reduce_degree(graph: UGraph) -> tuple[UGraph, list[Merge]]:
    """
    Strip nodes that cannot be branch vertices of a K5 or K3,3 minor.

    Repeatedly, on the lowest-named qualifying node: a node of degree 0 or 1
    is deleted; a node of degree 2 is smoothed by contracting the edge to its
    smaller neighbor. Every node of K5 and K3,3 has degree at least 3, so
    neither step can destroy such a minor.

    Returns:
        (reduced graph, contractions performed as (survivor, absorbed) pairs)
    """
    minor = prune(graph)
    merges: list[Merge] = []
    pending = [node for node in minor.nodes if minor.degree(node) <= 2]
    while pending:
        node = heapq.heappop(pending)
        if node not in minor or minor.degree(node) > 2:
            continue
        neighbors = sorted(minor.neighbors_of(node))
        if len(neighbors) <= 1:
            minor.remove_node(node)
            touched = neighbors
        else:
            survivor, absorbed = UEdge(node, neighbors[0]).nodes()
            _merge_into(minor, survivor, absorbed)
            merges.append((survivor, absorbed))
            touched = [survivor, neighbors[1]]
        for other in touched:
            if other in minor and minor.degree(other) <= 2:
                heapq.heappush(pending, other)
    return minor, merges


def is_viable(graph: UGraph) -> bool:
    """Whether graph is large enough to possibly be or contain K5 or K3,3."""
    n, m = graph.node_count, graph.edge_count
    return (n >= 5 and m >= 10) or (n >= 6 and m >= 9)


# =============================================================================
# Biconnected blocks
# =============================================================================


def biconnected_blocks(graph: UGraph) -> list[UGraph]:
    """
    Decompose graph into biconnected components (Tarjan's).

    Each returned block holds the edges of one component and their endpoints.
    Self-loops and isolated nodes belong to no block. A 2-connected minor such
    as K5 or K3,3 always lies within a single block.
    """
    order = list(graph.nodes)
    index = {node: i for i, node in enumerate(order)}
    adj: list[list[int]] = [[] for _ in order]
    for edge in graph.edges:
        if edge.is_loop():
            continue
        u, v = index[edge.smaller_node], index[edge.greater_node]
        adj[u].append(v)
        adj[v].append(u)

    num_nodes = len(order)
    disc = [-1] * num_nodes
    low = [0] * num_nodes
    parent = [-1] * num_nodes
    timer = 0
    edge_stack: list[tuple[int, int]] = []
    components: list[list[tuple[int, int]]] = []

    for root in range(num_nodes):
        if disc[root] != -1 or not adj[root]:
            continue
        disc[root] = low[root] = timer
        timer += 1
        stack: list[tuple[int, int]] = [(root, 0)]

        while stack:
            v, idx = stack[-1]
            if idx < len(adj[v]):
                stack[-1] = (v, idx + 1)
                w = adj[v][idx]
                if disc[w] == -1:
                    parent[w] = v
                    disc[w] = low[w] = timer
                    timer += 1
                    edge_stack.append((v, w))
                    stack.append((w, 0))
                elif w != parent[v] and disc[w] < disc[v]:
                    edge_stack.append((v, w))
                    low[v] = min(low[v], disc[w])
                continue

            stack.pop()
            if not stack:
                break
            u = stack[-1][0]
            low[u] = min(low[u], low[v])
            if low[v] >= disc[u]:
                # u separates the subtree of v: everything above (u, v) is a block
                comp: list[tuple[int, int]] = []
                while edge_stack:
                    top = edge_stack.pop()
                    comp.append(top)
                    if top == (u, v):
                        break
                components.append(comp)

    blocks: list[UGraph] = []
    for comp in components:
        blocks.append(UGraph.from_edges((order[a], order[b]) for a, b in comp))
    return blocks


__all__ = [
    "Merge",
    "MinorOperation",
    "delete_edge",
    "delete_node",
    "contract_edge",
    "single_step_minors",
    "remove_self_loops",
    "remove_isolated_nodes",
    "prune",
    "reduce_degree",
    "is_viable",
    "biconnected_blocks",
]
