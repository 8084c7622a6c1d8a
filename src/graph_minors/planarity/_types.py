"""Result type of the planarity decider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..graph import UGraph


@dataclass
class PlanarityResult:
    """Verdict of a planarity test.

    The result is truthy iff the graph is planar, so ``if is_planar(g):``
    reads naturally.

    Attributes:
        is_planar: Whether the graph is planar.
        witness: If non-planar, a minor of the input that is exactly K5 or
            K3,3. None if planar, or if non-planarity was established by the
            edge count alone after the search budget ran out.
        kuratowski_type: "K5", "K3,3" or None, matching the witness.
        branch_sets: For each witness node name, the original node names
            that were contracted into it. None when there is no witness.
        minors_explored: Number of distinct minors the search visited.
    """

    is_planar: bool
    witness: Optional[UGraph] = None
    kuratowski_type: Optional[str] = None
    branch_sets: Optional[dict[str, frozenset[str]]] = None
    minors_explored: int = 0

    @classmethod
    def planar(cls, minors_explored: int = 0) -> PlanarityResult:
        return cls(is_planar=True, minors_explored=minors_explored)

    @classmethod
    def non_planar(
        cls,
        witness: Optional[UGraph] = None,
        kuratowski_type: Optional[str] = None,
        branch_sets: Optional[dict[str, frozenset[str]]] = None,
        minors_explored: int = 0,
    ) -> PlanarityResult:
        return cls(
            is_planar=False,
            witness=witness,
            kuratowski_type=kuratowski_type,
            branch_sets=branch_sets,
            minors_explored=minors_explored,
        )

    def __bool__(self) -> bool:
        return self.is_planar
