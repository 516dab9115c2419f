"""Selection enums for the session module."""

from enum import Enum

__all__ = ["DistanceSelection", "Selection", "NO_DATA"]

# Shown as the current combination when nothing matches the selections
NO_DATA = "None"


class DistanceSelection(str, Enum):
    ALL   = "All"
    LONG  = "Long"
    SHORT = "Short"


class Selection(str, Enum):
    """Constraint on a yes/no facet (defence, faint, body)."""
    ALL = "All"
    YES = "Yes"
    NO  = "No"
