"""
Errors and outcome signals raised or reported by the grid search.
"""

from enum import Enum


class InvalidGrid(ValueError):
    """The grid is empty, ragged, mislabelled, or carries a negative cost."""


class NodeNotInGrid(LookupError):
    """A node handed to the search is not a member of the searched grid."""


class SearchOutcome(Enum):
    """How a search run terminated."""
    FOUND = "found"          # Finish node reached the head of the frontier
    TRAPPED = "trapped"      # Head of the frontier had infinite distance
    EXHAUSTED = "exhausted"  # Frontier ran dry without meeting either condition

    @property
    def reached(self) -> bool:
        return self is SearchOutcome.FOUND
