"""Depth-first search for a K5 or K3,3 minor.

The search walks the lattice of minors of a graph, from the graph itself
towards graphs of 5 and 6 nodes, and stops at the first minor that is
exactly K5 or K3,3.

Above 6 nodes only node deletion and edge contraction are needed: in any
K5 or K3,3 minor model, either some node lies outside every branch set (and
can be deleted) or some branch set holds two adjacent nodes (whose edge can
be contracted). At 5 and 6 nodes the remaining candidates are tested
directly, and at 6 nodes that includes the edge deletions that expose a
K3,3 spanning subgraph.

Each visited minor is first reduced (degree <= 2 nodes stripped) and split
into biconnected blocks. Minors known to contain no Kuratowski graph are
memoised by their canonical key.
"""

from __future__ import annotations

import warnings
from itertools import combinations
from typing import Optional

from ..graph import CanonicalKey, UGraph
from ..minors import (
    Merge,
    MinorOperation,
    biconnected_blocks,
    delete_edge,
    is_viable,
    prune,
    reduce_degree,
    single_step_minors,
)
from ..patterns import K5, K33, is_k5, is_k33
from ..validation import (
    SearchBudgetExceeded,
    SearchSizeWarning,
    validate_max_minors,
    validate_warn_threshold,
)
from ._types import PlanarityResult

BranchSets = dict[str, frozenset[str]]

# (witness graph, kuratowski type, branch sets of the state it was found in)
_Witness = tuple[UGraph, str, BranchSets]

_SHRINKING = (MinorOperation.CONTRACT_EDGE, MinorOperation.DELETE_NODE)

# Blocks above this many nodes after reduction take seconds or more to search
DEFAULT_WARN_THRESHOLD = 10


def exceeds_euler_bound(graph: UGraph) -> bool:
    """Whether a simple graph has more than 3n - 6 edges, which rules out planarity."""
    n = graph.node_count
    return n >= 3 and graph.edge_count > 3 * n - 6


class MinorSearch:
    """
    Planarity decider based on Kuratowski minor search.

    Example:
        search = MinorSearch(max_minors=10_000)
        result = search.run(graph)
        if not result:
            print(result.kuratowski_type, result.witness)
    """

    def __init__(
        self,
        *,
        max_minors: Optional[int] = None,
        reduce_degrees: bool = True,
        split_blocks: bool = True,
        warn_threshold: int = DEFAULT_WARN_THRESHOLD,
    ) -> None:
        """
        Initialize the search.

        Args:
            max_minors: Budget of minors to visit before raising
                SearchBudgetExceeded. None means unbounded.
            reduce_degrees: Strip degree <= 2 nodes from every minor.
            split_blocks: Search biconnected blocks independently.
            warn_threshold: Issue a SearchSizeWarning when the largest
                block left after reduction has more nodes than this.
        """
        self.max_minors = max_minors
        self.reduce_degrees = reduce_degrees
        self.split_blocks = split_blocks
        self.warn_threshold = warn_threshold

        self._explored = 0
        self._failed: set[CanonicalKey] = set()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def max_minors(self) -> Optional[int]:
        return self._max_minors

    @max_minors.setter
    def max_minors(self, value: Optional[int]) -> None:
        self._max_minors = validate_max_minors(value)

    @property
    def warn_threshold(self) -> int:
        return self._warn_threshold

    @warn_threshold.setter
    def warn_threshold(self, value: int) -> None:
        self._warn_threshold = validate_warn_threshold(value)

    @property
    def minors_explored(self) -> int:
        """Minors visited by the last run."""
        return self._explored

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def run(self, graph: UGraph) -> PlanarityResult:
        """
        Decide whether graph is planar.

        The input graph is never modified. Self-loops and isolated nodes are
        pruned before the search starts.

        Returns:
            PlanarityResult, with a K5 or K3,3 witness when non-planar.

        Raises:
            SearchBudgetExceeded: If max_minors runs out before a verdict and
                the edge count alone does not prove non-planarity.
        """
        return self._run(graph)

    def _run(self, graph: UGraph) -> PlanarityResult:
        # Entry points call this directly, so stacklevel=3 lands in caller code
        self._explored = 0
        self._failed = set()

        start = prune(graph)
        branches: BranchSets = {node.name: frozenset({node.name}) for node in start.nodes}
        largest = self._largest_block(start)
        if largest > self._warn_threshold:
            warnings.warn(
                f"Largest block still has {largest} nodes after reduction. "
                "Minor search is exponential in block size and may be slow; "
                "consider passing max_minors.",
                SearchSizeWarning,
                stacklevel=3,
            )

        try:
            found = self._search(start, branches)
        except SearchBudgetExceeded:
            if exceeds_euler_bound(start):
                return PlanarityResult.non_planar(minors_explored=self._explored)
            raise

        if found is None:
            return PlanarityResult.planar(minors_explored=self._explored)

        witness, kind, state_branches = found
        return PlanarityResult.non_planar(
            witness=witness,
            kuratowski_type=kind,
            branch_sets={node.name: state_branches[node.name] for node in witness.nodes},
            minors_explored=self._explored,
        )

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def _search(self, graph: UGraph, branches: BranchSets) -> Optional[_Witness]:
        if self.reduce_degrees:
            graph, merges = reduce_degree(graph)
            branches = _merge_branches(branches, merges)
        if not is_viable(graph):
            return None

        key = graph.canonical_key()
        if key in self._failed:
            return None
        self._visit()

        found = self._explore(graph, branches)
        if found is None:
            self._failed.add(key)
        return found

    def _explore(self, graph: UGraph, branches: BranchSets) -> Optional[_Witness]:
        if self.split_blocks:
            blocks = [block for block in biconnected_blocks(graph) if is_viable(block)]
            if len(blocks) != 1 or blocks[0] != graph:
                for block in blocks:
                    found = self._search(block, branches)
                    if found is not None:
                        return found
                return None

        n = graph.node_count
        if n == 5:
            return (graph, K5, branches) if is_k5(graph) else None
        if n == 6:
            return self._match_six(graph, branches)

        for op, arg, minor in single_step_minors(graph, _SHRINKING):
            child = branches
            if op is MinorOperation.CONTRACT_EDGE:
                child = _merge_branches(branches, [arg.nodes()])
            found = self._search(minor, child)
            if found is not None:
                return found
        return None

    def _match_six(self, graph: UGraph, branches: BranchSets) -> Optional[_Witness]:
        """Test every 5-node minor for K5 and every bipartition for K3,3."""
        nodes = graph.nodes
        first, rest = nodes[0], nodes[1:]
        for pair in combinations(rest, 2):
            side = {first, *pair}
            candidate = graph
            for edge in graph.edges:
                if (edge.smaller_node in side) == (edge.greater_node in side):
                    candidate = delete_edge(candidate, edge)
            if is_k33(candidate):
                return candidate, K33, branches

        for op, arg, minor in single_step_minors(graph, _SHRINKING):
            if is_k5(minor):
                child = branches
                if op is MinorOperation.CONTRACT_EDGE:
                    child = _merge_branches(branches, [arg.nodes()])
                return minor, K5, child
        return None

    def _visit(self) -> None:
        self._explored += 1
        if self._max_minors is not None and self._explored > self._max_minors:
            raise SearchBudgetExceeded(self._explored - 1)

    def _largest_block(self, graph: UGraph) -> int:
        """Node count of the largest viable block the search will start from."""
        reduced = reduce_degree(graph)[0] if self.reduce_degrees else graph
        blocks = biconnected_blocks(reduced) if self.split_blocks else [reduced]
        return max((block.node_count for block in blocks if is_viable(block)), default=0)


def _merge_branches(branches: BranchSets, merges: list[Merge]) -> BranchSets:
    """Fold each absorbed node's branch set into its survivor's."""
    if not merges:
        return branches
    merged = dict(branches)
    for survivor, absorbed in merges:
        merged[survivor.name] = merged[survivor.name] | merged.pop(absorbed.name)
    return merged
