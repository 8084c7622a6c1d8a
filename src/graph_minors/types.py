"""
Value types for undirected graphs.

This module provides the two immutable building blocks of a graph:
- Node: a vertex identified by its name
- UEdge: an unordered pair of nodes stored in canonical order

Both are frozen dataclasses, so they hash, compare and sort by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .validation import validate_node_name


@dataclass(frozen=True, order=True)
class Node:
    """
    Graph vertex.

    Two nodes are equal iff their names are equal, and nodes sort by name.

    Attributes:
        name: Stable string identity of the node
    """

    name: str

    def __post_init__(self) -> None:
        validate_node_name(self.name)

    def __str__(self) -> str:
        return self.name


NodeLike = Union[Node, str]


def as_node(value: NodeLike) -> Node:
    """Wrap a plain name in a Node, pass Nodes through."""
    if isinstance(value, Node):
        return value
    return Node(value)


@dataclass(frozen=True, order=True, init=False)
class UEdge:
    """
    Undirected edge between two nodes.

    Endpoints are stored as (smaller, greater) under the node ordering, so
    ``UEdge(a, b) == UEdge(b, a)``. Self-loops (both endpoints equal) can be
    represented; the planarity search strips them.

    Attributes:
        smaller_node: Endpoint that sorts first
        greater_node: Endpoint that sorts last
    """

    smaller_node: Node
    greater_node: Node

    def __init__(self, one_node: NodeLike, other_node: NodeLike) -> None:
        one, other = as_node(one_node), as_node(other_node)
        if one > other:
            one, other = other, one
        object.__setattr__(self, "smaller_node", one)
        object.__setattr__(self, "greater_node", other)

    @classmethod
    def of(cls, one_name: str, other_name: str) -> UEdge:
        """Build an edge from two node names."""
        return cls(Node(one_name), Node(other_name))

    def nodes(self) -> tuple[Node, Node]:
        return (self.smaller_node, self.greater_node)

    def names(self) -> tuple[str, str]:
        return (self.smaller_node.name, self.greater_node.name)

    def is_loop(self) -> bool:
        return self.smaller_node == self.greater_node

    def touches(self, node: Node) -> bool:
        """Whether node is one of the endpoints."""
        return node == self.smaller_node or node == self.greater_node

    def other(self, node: Node) -> Node:
        """
        Return the endpoint opposite to node.

        Raises:
            ValueError: If node is not an endpoint of this edge
        """
        if node == self.smaller_node:
            return self.greater_node
        if node == self.greater_node:
            return self.smaller_node
        raise ValueError(f"{node} is not an endpoint of {self}")

    def __str__(self) -> str:
        return f"{self.smaller_node.name}-{self.greater_node.name}"


EdgeLike = Union[UEdge, tuple[NodeLike, NodeLike]]


def as_edge(value: EdgeLike) -> UEdge:
    """Wrap an endpoint pair in a UEdge, pass UEdges through."""
    if isinstance(value, UEdge):
        return value
    one, other = value
    return UEdge(one, other)


__all__ = [
    "Node",
    "NodeLike",
    "UEdge",
    "EdgeLike",
    "as_node",
    "as_edge",
]
