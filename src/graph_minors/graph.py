"""
Undirected graph container.

UGraph holds a set of nodes and a set of canonical edges and keeps one
invariant at all times: every edge references two nodes that are in the
node set. Mutations never raise; they return whether the graph changed.

Nodes are kept as the keys of an adjacency index, so neighbor and degree
queries cost O(degree) rather than a scan of the edge set.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

import numpy as np
from typing_extensions import Self

from .types import EdgeLike, Node, NodeLike, UEdge, as_edge, as_node

CanonicalKey = tuple[tuple[str, ...], tuple[tuple[str, str], ...]]


class UGraph:
    """
    Simple undirected graph with named nodes.

    Nodes may be given as Node objects or plain names, edges as UEdge
    objects or pairs of either.

    Example:
        graph = UGraph()
        graph.add_node("a")
        graph.add_node(Node("b"))
        graph.add_edge(("a", "b"))           # True
        graph.add_edge(UEdge.of("a", "c"))   # False, "c" is not a node
    """

    __slots__ = ("_adj", "_edges")

    def __init__(
        self,
        nodes: Iterable[NodeLike] = (),
        edges: Iterable[EdgeLike] = (),
    ) -> None:
        self._adj: dict[Node, set[Node]] = {}
        self._edges: set[UEdge] = set()
        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge)

    @classmethod
    def from_edges(cls, pairs: Iterable[EdgeLike]) -> Self:
        """Build a graph from edges, adding every endpoint as a node."""
        graph = cls()
        edges = [as_edge(pair) for pair in pairs]
        for edge in edges:
            graph.add_node(edge.smaller_node)
            graph.add_node(edge.greater_node)
        for edge in edges:
            graph.add_edge(edge)
        return graph

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Nodes in ascending order."""
        return tuple(sorted(self._adj))

    @property
    def edges(self) -> tuple[UEdge, ...]:
        """Edges in ascending canonical order."""
        return tuple(sorted(self._edges))

    @property
    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_node(self, node: NodeLike) -> bool:
        return as_node(node) in self._adj

    def has_edge(self, edge: EdgeLike) -> bool:
        return as_edge(edge) in self._edges

    def neighbors_of(self, node: NodeLike) -> set[Node]:
        """Nodes adjacent to node, as a new set (empty for absent nodes)."""
        return set(self._adj.get(as_node(node), ()))

    def incident_edges(self, node: NodeLike) -> list[UEdge]:
        node = as_node(node)
        return sorted(UEdge(node, other) for other in self._adj.get(node, ()))

    def degree(self, node: NodeLike) -> int:
        """Number of distinct neighbors of node other than itself."""
        node = as_node(node)
        neighbors = self._adj.get(node, ())
        return len(neighbors) - (1 if node in neighbors else 0)

    def degrees(self) -> dict[Node, int]:
        """Degree of every node, zero for isolated ones. Self-loops are ignored."""
        return {node: self.degree(node) for node in sorted(self._adj)}

    def adjacency_matrix(self) -> np.ndarray:
        """
        Symmetric 0/1 adjacency matrix over the sorted node order.

        Self-loops set the diagonal entry.
        """
        order = {node: i for i, node in enumerate(sorted(self._adj))}
        matrix = np.zeros((len(order), len(order)), dtype=np.int8)
        for edge in self._edges:
            i, j = order[edge.smaller_node], order[edge.greater_node]
            matrix[i, j] = 1
            matrix[j, i] = 1
        return matrix

    def canonical_key(self) -> CanonicalKey:
        """Hashable (sorted node names, sorted edge name pairs) form of the graph."""
        return (
            tuple(node.name for node in sorted(self._adj)),
            tuple(edge.names() for edge in sorted(self._edges)),
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_node(self, node: NodeLike) -> bool:
        """Insert node; False if it was already present."""
        node = as_node(node)
        if node in self._adj:
            return False
        self._adj[node] = set()
        return True

    def add_edge(self, edge: EdgeLike) -> bool:
        """
        Insert edge.

        Returns False, leaving the graph unchanged, when either endpoint is
        not a node of the graph or the edge is already present.
        """
        edge = as_edge(edge)
        if edge.greater_node not in self._adj:
            return False
        if edge.smaller_node not in self._adj:
            return False
        if edge in self._edges:
            return False
        self._edges.add(edge)
        self._adj[edge.smaller_node].add(edge.greater_node)
        self._adj[edge.greater_node].add(edge.smaller_node)
        return True

    def remove_node(self, node: NodeLike) -> bool:
        """Remove node and every edge incident to it; False if node was absent."""
        node = as_node(node)
        if node not in self._adj:
            return False
        # Collect first, the neighbor set cannot change while being scanned
        remove_us = [UEdge(node, other) for other in self._adj[node]]
        for edge in remove_us:
            self.remove_edge(edge)
        del self._adj[node]
        return True

    def remove_edge(self, edge: EdgeLike) -> bool:
        """Remove edge; False if it was absent."""
        edge = as_edge(edge)
        if edge not in self._edges:
            return False
        self._edges.remove(edge)
        self._adj[edge.smaller_node].discard(edge.greater_node)
        self._adj[edge.greater_node].discard(edge.smaller_node)
        return True

    def copy(self) -> UGraph:
        """Independent copy; later mutations of either graph do not leak."""
        other = UGraph()
        other._adj = {node: set(neighbors) for node, neighbors in self._adj.items()}
        other._edges = set(self._edges)
        return other

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __contains__(self, item: Union[NodeLike, UEdge]) -> bool:
        if isinstance(item, UEdge):
            return item in self._edges
        if isinstance(item, str):
            item = Node(item)
        return item in self._adj

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UGraph):
            return NotImplemented
        return self._adj.keys() == other._adj.keys() and self._edges == other._edges

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        edges = ", ".join(str(edge) for edge in self.edges)
        return f"UGraph(nodes={self.node_count}, edges=[{edges}])"


__all__ = ["UGraph", "CanonicalKey"]
