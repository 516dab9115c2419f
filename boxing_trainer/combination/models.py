"""Data models for the combination module."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["Distance", "YesNo", "Combination"]


class Distance(str, Enum):
    SHORT = "Short"
    LONG  = "Long"


class YesNo(str, Enum):
    YES = "Yes"
    NO  = "No"


@dataclass(frozen=True)
class Combination:
    """
    One named move sequence, e.g. "1-1-2-step_back-2".

    Instances are created once by the loader and shared by reference
    between the full record set and every filtered view over it.

    Fields
    ──────
    description — display label (trimmed; duplicates allowed)
    distance    — Short or Long range
    defense     — includes a defensive move
    faint       — includes a feint
    body        — includes a body shot
    url         — optional reference link
    """
    description: str
    distance:    Distance
    defense:     YesNo
    faint:       YesNo
    body:        YesNo
    url:         Optional[str] = None

    def __str__(self) -> str:
        return self.description
