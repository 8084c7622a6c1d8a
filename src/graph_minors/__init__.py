"""
graph-minors: planarity testing of undirected graphs by Kuratowski minors.

A finite graph is planar iff it has no minor isomorphic to K5 or K3,3.
This package provides:
- Node / UEdge / UGraph: a simple undirected graph with named nodes
- is_k5 / is_k33: exact matchers for the two Kuratowski graphs
- minor operations: edge deletion, node deletion, edge contraction
- is_planar: a minor search that returns a witness when non-planar
"""

__version__ = "0.1.0"

from .graph import UGraph

# Minor operations
from .minors import (
    MinorOperation,
    biconnected_blocks,
    contract_edge,
    delete_edge,
    delete_node,
    is_viable,
    prune,
    reduce_degree,
    remove_isolated_nodes,
    remove_self_loops,
    single_step_minors,
)

# Exact matchers
from .patterns import K5, K33, is_k5, is_k33, kuratowski_type

# Planarity decider
from .planarity import MinorSearch, PlanarityResult, exceeds_euler_bound, is_planar
from .types import Node, UEdge
from .validation import (
    InvalidNodeError,
    SearchBudgetExceeded,
    SearchSizeWarning,
    ValidationError,
)

__all__ = [
    # Graph model
    "Node",
    "UEdge",
    "UGraph",
    # Matchers
    "K5",
    "K33",
    "is_k5",
    "is_k33",
    "kuratowski_type",
    # Minors
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
    # Planarity
    "is_planar",
    "exceeds_euler_bound",
    "MinorSearch",
    "PlanarityResult",
    # Errors
    "ValidationError",
    "InvalidNodeError",
    "SearchBudgetExceeded",
    "SearchSizeWarning",
]
