"""
Exceptions, warnings and parameter validation for graph minor search.

Graph mutations never raise: they report rejection through a boolean.
The exceptions here cover the remaining cases, which are malformed values
handed to constructors and search options outside their valid range.
"""

from __future__ import annotations

from typing import Any, Optional


class ValidationError(ValueError):
    """Base exception for invalid values and search options."""

    pass


class InvalidNodeError(ValidationError):
    """Raised when a node identity is not a string."""

    pass


class SearchBudgetExceeded(RuntimeError):
    """Raised when the minor search runs out of budget before a verdict.

    Attributes:
        minors_explored: Number of minors visited before giving up.
    """

    def __init__(self, minors_explored: int) -> None:
        super().__init__(
            f"Minor search budget exhausted after exploring {minors_explored} minors"
        )
        self.minors_explored = minors_explored


class SearchSizeWarning(UserWarning):
    """Warning issued when a graph is large enough to make the search slow."""

    pass


def validate_node_name(name: Any) -> str:
    """
    Validate a node identity.

    Args:
        name: Candidate node name

    Returns:
        The name, unchanged

    Raises:
        InvalidNodeError: If name is not a string
    """
    if not isinstance(name, str):
        raise InvalidNodeError(f"Node name must be a str, got {type(name).__name__}")
    return name


def validate_max_minors(max_minors: Optional[int]) -> Optional[int]:
    """
    Validate the minor search budget.

    Args:
        max_minors: Maximum number of minors to explore, or None for no limit

    Returns:
        Validated budget

    Raises:
        ValidationError: If max_minors < 1
    """
    if max_minors is None:
        return None
    if isinstance(max_minors, bool) or not isinstance(max_minors, int):
        raise ValidationError(f"max_minors must be an int or None, got {max_minors!r}")
    if max_minors < 1:
        raise ValidationError(f"max_minors must be >= 1, got {max_minors}")
    return max_minors


def validate_warn_threshold(threshold: int) -> int:
    """Validate the node count above which a SearchSizeWarning is issued."""
    if threshold < 0:
        raise ValidationError(f"warn_threshold must be >= 0, got {threshold}")
    return threshold


__all__ = [
    "ValidationError",
    "InvalidNodeError",
    "SearchBudgetExceeded",
    "SearchSizeWarning",
    "validate_node_name",
    "validate_max_minors",
    "validate_warn_threshold",
]
