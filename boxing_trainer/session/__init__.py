"""
session — filter, order and navigation state over loaded combinations.

Public API
──────────
TrainingSession      — working set, cursor, step counter and selections
DistanceSelection    — All / Long / Short
Selection            — All / Yes / No (defence, faint, body)
matches              — per-record facet test
filter_combinations  — order-preserving facet filter
"""

from .filtering import filter_combinations, matches
from .models import NO_DATA, DistanceSelection, Selection
from .state import TrainingSession

__all__ = [
    "TrainingSession",
    "DistanceSelection",
    "Selection",
    "NO_DATA",
    "matches",
    "filter_combinations",
]
