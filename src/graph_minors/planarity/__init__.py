"""Planarity testing by Kuratowski minor search.

A finite graph is planar iff none of its minors is K5 or K3,3. This module
searches the minors of a graph for either one and returns the first it
finds as a witness of non-planarity.

Public API:
    is_planar(graph, **options) -> PlanarityResult
    MinorSearch(**options).run(graph) -> PlanarityResult
"""

from __future__ import annotations

from typing import Optional

from ..graph import UGraph
from ._search import DEFAULT_WARN_THRESHOLD, MinorSearch, exceeds_euler_bound
from ._types import PlanarityResult


def is_planar(
    graph: UGraph,
    *,
    max_minors: Optional[int] = None,
    reduce_degrees: bool = True,
    split_blocks: bool = True,
    warn_threshold: int = DEFAULT_WARN_THRESHOLD,
) -> PlanarityResult:
    """Test whether a graph is planar.

    The result is truthy iff the graph is planar; when it is not, the
    result carries a minor of the graph that is exactly K5 or K3,3.

    Args:
        graph: Graph to test. It is not modified.
        max_minors: Budget of minors to visit. None means unbounded.
        reduce_degrees: Strip degree <= 2 nodes from every minor.
        split_blocks: Search biconnected blocks independently.
        warn_threshold: Largest-block node count above which a
            SearchSizeWarning is issued.

    Returns:
        PlanarityResult.

    Raises:
        SearchBudgetExceeded: If max_minors is exhausted before a verdict.
    """
    search = MinorSearch(
        max_minors=max_minors,
        reduce_degrees=reduce_degrees,
        split_blocks=split_blocks,
        warn_threshold=warn_threshold,
    )
    return search._run(graph)


__all__ = [
    "is_planar",
    "exceeds_euler_bound",
    "MinorSearch",
    "PlanarityResult",
]
