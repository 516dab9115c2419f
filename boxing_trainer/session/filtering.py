"""
Facet filtering over combination records.

A record is rejected by a facet only when the opposite concrete value is
selected; ALL accepts both.  A record passes when all four facets accept it.
"""

from typing import Iterable

from boxing_trainer.combination.models import Combination, Distance, YesNo
from .models import DistanceSelection, Selection

__all__ = ["matches", "filter_combinations"]

_DISTANCE_EXCLUDED_BY = {
    Distance.LONG:  DistanceSelection.SHORT,
    Distance.SHORT: DistanceSelection.LONG,
}

_YES_NO_EXCLUDED_BY = {
    YesNo.YES: Selection.NO,
    YesNo.NO:  Selection.YES,
}


def matches(
    combination: Combination,
    distance: DistanceSelection,
    defence: Selection,
    faint: Selection,
    body: Selection,
) -> bool:
    """Return True if *combination* satisfies all four selections."""
    return (
        _DISTANCE_EXCLUDED_BY[combination.distance] != distance
        and _YES_NO_EXCLUDED_BY[combination.defense] != defence
        and _YES_NO_EXCLUDED_BY[combination.faint] != faint
        and _YES_NO_EXCLUDED_BY[combination.body] != body
    )


def filter_combinations(
    combinations: Iterable[Combination],
    distance: DistanceSelection = DistanceSelection.ALL,
    defence: Selection = Selection.ALL,
    faint: Selection = Selection.ALL,
    body: Selection = Selection.ALL,
) -> list[Combination]:
    """Return the matching combinations in input order (same objects)."""
    return [
        c for c in combinations
        if matches(c, distance, defence, faint, body)
    ]
