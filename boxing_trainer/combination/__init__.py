"""
combination — boxing combination records and the data-file loader.

Public API
──────────
Combination        — immutable record (description + facets + link)
Distance, YesNo    — facet value enums
load_combinations  — parse a whole combinations file
parse_combination  — parse a single data line
"""

from .loader import load_combinations, parse_combination
from .models import Combination, Distance, YesNo

__all__ = ["Combination", "Distance", "YesNo", "load_combinations", "parse_combination"]
