"""
TrainingSession — the trainer's in-memory state.

No Qt imports here; the session is driven by the GUI page and the CLI alike
and is testable without a display.  Presentation layers read the accessors
to render and forward user actions to the mutation methods.

Usage::

    session = TrainingSession.from_file("combinations.txt")
    session.set_defence_selection(Selection.YES)
    session.advance()
    print(session.display_number, session.description)
"""

import logging
import random
import time
from pathlib import Path
from typing import Iterable, Optional, Type, TypeVar, Union

from boxing_trainer.combination import Combination, load_combinations
from boxing_trainer.combination.loader import FIELD_COUNT
from boxing_trainer.exceptions import CombinationIOError
from .filtering import filter_combinations
from .models import NO_DATA, DistanceSelection, Selection

__all__ = ["TrainingSession"]

logger = logging.getLogger(__name__)

E = TypeVar("E", DistanceSelection, Selection)


class TrainingSession:
    """
    Full record set, facet selections, working set and cursor.

    Attributes
    ──────────
    all_records  — every loaded combination (replaced wholesale on reload)
    working_set  — derived: records matching the four selections, in file
                   order after filtering or shuffled after reset_randomized()
    cursor       — index of the displayed record; 0 when the set is empty
    step_count   — navigation counter shown as "N." (starts at 1)

    Records are shared by reference between all_records and working_set and
    are never copied or mutated.
    """

    def __init__(
        self,
        combinations: Iterable[Combination],
        *,
        path: Optional[Union[str, Path]] = None,
        field_count: int = FIELD_COUNT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._path        = Path(path) if path is not None else None
        self._field_count = field_count
        self._rng         = rng

        self._all_records: tuple[Combination, ...] = tuple(combinations)
        self._working_set: list[Combination]       = []
        self._cursor:      int                     = 0
        self._step_count:  int                     = 1

        self._distance: DistanceSelection = DistanceSelection.ALL
        self._defence:  Selection         = Selection.ALL
        self._faint:    Selection         = Selection.ALL
        self._body:     Selection         = Selection.ALL

        self.apply_selections()
        self.reset_randomized()

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        field_count: int = FIELD_COUNT,
        rng: Optional[random.Random] = None,
    ) -> "TrainingSession":
        """
        Load *path* and build a session over its combinations.

        Raises:
            CombinationError: The file is missing, unreadable or malformed.
                The caller decides whether that is fatal.
        """
        combinations = load_combinations(path, field_count)
        return cls(combinations, path=path, field_count=field_count, rng=rng)

    # ── Read accessors ────────────────────────────────────────────────────

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def all_records(self) -> tuple[Combination, ...]:
        return self._all_records

    @property
    def working_set(self) -> tuple[Combination, ...]:
        return tuple(self._working_set)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def display_number(self) -> str:
        """Step counter formatted for display, e.g. "3."."""
        return f"{self._step_count}."

    @property
    def is_empty(self) -> bool:
        return not self._working_set

    @property
    def current(self) -> Optional[Combination]:
        """The displayed combination, or None when the working set is empty."""
        if not self._working_set:
            return None
        return self._working_set[self._cursor]

    @property
    def description(self) -> str:
        """Description of the displayed combination, or "None" when empty."""
        current = self.current
        return current.description if current is not None else NO_DATA

    def items(self) -> list[tuple[int, str]]:
        """(index, description) rows for the working set."""
        return [(i, c.description) for i, c in enumerate(self._working_set)]

    @property
    def distance_selection(self) -> DistanceSelection:
        return self._distance

    @property
    def defence_selection(self) -> Selection:
        return self._defence

    @property
    def faint_selection(self) -> Selection:
        return self._faint

    @property
    def body_selection(self) -> Selection:
        return self._body

    # ── Filtering ─────────────────────────────────────────────────────────

    def set_distance_selection(self, value: Union[DistanceSelection, str]) -> None:
        self._distance = _coerce(DistanceSelection, value)
        self.apply_selections()

    def set_defence_selection(self, value: Union[Selection, str]) -> None:
        self._defence = _coerce(Selection, value)
        self.apply_selections()

    def set_faint_selection(self, value: Union[Selection, str]) -> None:
        self._faint = _coerce(Selection, value)
        self.apply_selections()

    def set_body_selection(self, value: Union[Selection, str]) -> None:
        self._body = _coerce(Selection, value)
        self.apply_selections()

    def apply_selections(self) -> None:
        """Recompute the working set in file order and return to the start."""
        self._working_set = filter_combinations(
            self._all_records,
            self._distance,
            self._defence,
            self._faint,
            self._body,
        )
        self._cursor = 0
        self._step_count = 1
        logger.debug(
            "Filter distance=%s defence=%s faint=%s body=%s → %d of %d",
            self._distance.value, self._defence.value, self._faint.value,
            self._body.value, len(self._working_set), len(self._all_records),
        )

    # ── Navigation ────────────────────────────────────────────────────────

    def advance(self) -> None:
        """Move to the next combination, wrapping to the first."""
        if not self._working_set:
            return
        self._step_count += 1
        self._cursor = (self._cursor + 1) % len(self._working_set)

    def retreat(self) -> None:
        """Move to the previous combination, wrapping to the last.

        The step counter still increases: it counts actions, not position.
        """
        if not self._working_set:
            return
        self._step_count += 1
        if self._cursor == 0:
            self._cursor = len(self._working_set) - 1
        else:
            self._cursor -= 1

    def jump_to(self, index: int) -> None:
        """Display the combination at *index*; the caller supplies a valid index."""
        self._step_count += 1
        self._cursor = index

    def reset_sequential(self) -> None:
        """Back to the first combination with the working set in file order."""
        self.apply_selections()

    def reset_randomized(self, seed: Optional[int] = None) -> None:
        """
        Back to the first combination with the working set shuffled.

        Without *seed* (and without an injected rng) the shuffle is seeded
        from the wall clock, so every run gets a different order.
        """
        self._step_count = 1
        self._cursor = 0
        if seed is not None:
            rng = random.Random(seed)
        elif self._rng is not None:
            rng = self._rng
        else:
            rng = random.Random(time.time_ns() // 1_000_000)
        rng.shuffle(self._working_set)

    # ── Reload ────────────────────────────────────────────────────────────

    def reload(self) -> None:
        """
        Re-read the combinations file, re-apply the selections and shuffle.

        On failure the previous state is kept untouched.

        Raises:
            CombinationError: The file could not be loaded, or the session
                was built without a path.
        """
        if self._path is None:
            raise CombinationIOError(
                FileNotFoundError("session has no combinations file to reload")
            )
        combinations = load_combinations(self._path, self._field_count)
        self._all_records = tuple(combinations)
        self.apply_selections()
        self.reset_randomized()
        logger.info("Reloaded %d combinations", len(self._all_records))


# ── Helpers ───────────────────────────────────────────────────────────────────

def _coerce(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Accept an enum member or its value/name in any case ("yes", "ALL")."""
    if isinstance(value, enum_cls):
        return value
    token = str(value).strip().lower()
    for member in enum_cls:
        if token in (member.value.lower(), member.name.lower()):
            return member
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r}")
