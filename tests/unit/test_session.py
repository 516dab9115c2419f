"""
Unit tests for boxing_trainer/session/ — no Qt dependency.

Coverage plan
─────────────
filtering        → 4 tests  (all 81 selection combinations, All = identity,
                             order + identity preserved, single facet)
construction     → 3 tests
selections       → 3 tests
navigation       → 7 tests  (advance/retreat inverse, cycling, wrap,
                             empty no-op, jump_to, counter quirk)
ordering         → 4 tests  (sequential, randomized permutation, empty)
reload           → 3 tests  (success, missing file keeps state, no path)
─────────────────────────────────────────────────────────────────
Total            = 24 tests
"""

import itertools
import random
from pathlib import Path

import pytest

from boxing_trainer.combination import Combination, Distance, YesNo
from boxing_trainer.session import DistanceSelection, Selection


def _records() -> list[Combination]:
    """One record for every facet combination (16), in a fixed order."""
    records = []
    for i, (dist, de, fa, bo) in enumerate(itertools.product(
        Distance, YesNo, YesNo, YesNo,
    )):
        records.append(Combination(
            description=f"combo-{i}",
            distance=dist,
            defense=de,
            faint=fa,
            body=bo,
        ))
    return records


def _session(records=None, **kwargs):
    from boxing_trainer.session import TrainingSession
    return TrainingSession(_records() if records is None else records,
                           rng=random.Random(1234), **kwargs)


def _ok(value, selection) -> bool:
    return selection.value == "All" or selection.value == value.value


# ─────────────────────────────────────────────────────────────────────────────
# 1. Filtering
# ─────────────────────────────────────────────────────────────────────────────

class TestFiltering:

    def test_every_selection_combination(self):
        from boxing_trainer.session import filter_combinations
        records = _records()
        for dist, de, fa, bo in itertools.product(
            DistanceSelection, Selection, Selection, Selection,
        ):
            result = filter_combinations(records, dist, de, fa, bo)
            expected = [
                r for r in records
                if _ok(r.distance, dist) and _ok(r.defense, de)
                and _ok(r.faint, fa) and _ok(r.body, bo)
            ]
            assert result == expected
            excluded = [r for r in records if r not in result]
            for r in excluded:
                assert not (_ok(r.distance, dist) and _ok(r.defense, de)
                            and _ok(r.faint, fa) and _ok(r.body, bo))

    def test_all_selections_return_full_set_in_order(self):
        from boxing_trainer.session import filter_combinations
        records = _records()
        assert filter_combinations(records) == records

    def test_result_shares_record_instances(self):
        from boxing_trainer.session import filter_combinations
        records = _records()
        result = filter_combinations(records, defence=Selection.YES)
        assert all(any(r is orig for orig in records) for r in result)

    def test_matches_single_facet(self):
        from boxing_trainer.session import matches
        rec = Combination("x", Distance.SHORT, YesNo.YES, YesNo.NO, YesNo.NO)
        all_ = Selection.ALL
        assert matches(rec, DistanceSelection.SHORT, all_, all_, all_)
        assert not matches(rec, DistanceSelection.LONG, all_, all_, all_)
        assert not matches(rec, DistanceSelection.ALL, Selection.NO, all_, all_)
        assert matches(rec, DistanceSelection.ALL, all_, Selection.NO, all_)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Construction
# ─────────────────────────────────────────────────────────────────────────────

class TestConstruction:

    def test_defaults(self):
        s = _session()
        assert s.distance_selection == DistanceSelection.ALL
        assert s.defence_selection == Selection.ALL
        assert s.faint_selection == Selection.ALL
        assert s.body_selection == Selection.ALL
        assert s.cursor == 0
        assert s.step_count == 1
        assert s.display_number == "1."

    def test_initial_working_set_is_a_permutation(self):
        s = _session()
        assert sorted(c.description for c in s.working_set) == \
            sorted(c.description for c in s.all_records)

    def test_empty_session_reports_no_data(self):
        s = _session(records=[])
        assert s.description == "None"
        assert s.current is None
        assert s.items() == []
        assert s.cursor == 0


# ─────────────────────────────────────────────────────────────────────────────
# 3. Selections
# ─────────────────────────────────────────────────────────────────────────────

class TestSelections:

    def test_selection_filters_in_file_order_and_resets(self):
        s = _session()
        s.advance()
        s.advance()
        s.set_defence_selection(Selection.YES)
        assert s.cursor == 0
        assert s.step_count == 1
        assert list(s.working_set) == [r for r in s.all_records if r.defense == YesNo.YES]

    def test_string_values_are_coerced(self):
        s = _session()
        s.set_distance_selection("long")
        s.set_body_selection("NO")
        assert s.distance_selection == DistanceSelection.LONG
        assert s.body_selection == Selection.NO
        assert all(r.distance == Distance.LONG and r.body == YesNo.NO for r in s.working_set)

    def test_invalid_selection_raises(self):
        s = _session()
        with pytest.raises(ValueError):
            s.set_faint_selection("maybe")


# ─────────────────────────────────────────────────────────────────────────────
# 4. Navigation
# ─────────────────────────────────────────────────────────────────────────────

class TestNavigation:

    @pytest.mark.parametrize("size", [1, 2, 5, 16])
    def test_advance_then_retreat_restores_cursor(self, size):
        s = _session(records=_records()[:size])
        for start in range(size):
            s.jump_to(start)
            s.advance()
            s.retreat()
            assert s.cursor == start
            s.retreat()
            s.advance()
            assert s.cursor == start

    def test_advance_cycles_through_every_index(self):
        s = _session()
        n = len(s.working_set)
        seen = []
        for _ in range(n):
            seen.append(s.cursor)
            s.advance()
        assert sorted(seen) == list(range(n))
        assert s.cursor == 0

    def test_retreat_wraps_to_last(self):
        s = _session()
        s.retreat()
        assert s.cursor == len(s.working_set) - 1

    def test_retreat_also_increments_step_count(self):
        s = _session()
        s.retreat()
        s.retreat()
        assert s.step_count == 3

    def test_navigation_on_empty_set_is_noop(self):
        s = _session(records=[])
        s.advance()
        s.retreat()
        assert s.cursor == 0
        assert s.step_count == 1

    def test_jump_to_sets_cursor_and_counts(self):
        s = _session()
        s.jump_to(5)
        assert s.cursor == 5
        assert s.step_count == 2
        assert s.description == s.working_set[5].description

    def test_items_lists_index_and_description(self):
        s = _session()
        items = s.items()
        assert [i for i, _ in items] == list(range(len(s.working_set)))
        assert [d for _, d in items] == [c.description for c in s.working_set]


# ─────────────────────────────────────────────────────────────────────────────
# 5. Ordering
# ─────────────────────────────────────────────────────────────────────────────

class TestOrdering:

    def test_reset_sequential_restores_file_order(self):
        s = _session()
        s.advance()
        s.reset_sequential()
        assert list(s.working_set) == list(s.all_records)
        assert (s.cursor, s.step_count) == (0, 1)

    def test_reset_randomized_is_permutation_and_resets(self):
        s = _session()
        s.reset_sequential()
        s.advance()
        s.advance()
        s.reset_randomized()
        assert (s.cursor, s.step_count) == (0, 1)
        assert set(map(id, s.working_set)) == set(map(id, s.all_records))

    def test_reset_randomized_with_seed_is_repeatable(self):
        a = _session()
        b = _session()
        a.reset_randomized(seed=7)
        b.reset_randomized(seed=7)
        assert a.working_set == b.working_set

    def test_reset_randomized_on_empty_set(self):
        s = _session(records=[])
        s.reset_randomized()
        assert s.cursor == 0
        assert s.working_set == ()


# ─────────────────────────────────────────────────────────────────────────────
# 6. Reload
# ─────────────────────────────────────────────────────────────────────────────

def _write(path: Path, *descriptions: str) -> None:
    path.write_text(
        "".join(f"{d}; Long; Yes; No; No;\n" for d in descriptions),
        encoding="utf-8",
    )


class TestReload:

    def test_reload_picks_up_new_records_and_keeps_selections(self, tmp_path):
        from boxing_trainer.session import TrainingSession
        path = tmp_path / "combinations.txt"
        _write(path, "a", "b")
        s = TrainingSession.from_file(path)
        s.set_defence_selection(Selection.YES)
        _write(path, "a", "b", "c")
        s.reload()
        assert len(s.all_records) == 3
        assert len(s.working_set) == 3
        assert s.defence_selection == Selection.YES
        assert (s.cursor, s.step_count) == (0, 1)

    def test_reload_failure_keeps_previous_state(self, tmp_path):
        from boxing_trainer.exceptions import CombinationIOError
        from boxing_trainer.session import TrainingSession
        path = tmp_path / "combinations.txt"
        _write(path, "a", "b", "c")
        s = TrainingSession.from_file(path)
        s.advance()
        before = (s.all_records, s.working_set, s.cursor, s.step_count)
        path.unlink()
        with pytest.raises(CombinationIOError):
            s.reload()
        assert (s.all_records, s.working_set, s.cursor, s.step_count) == before

    def test_reload_without_path_raises(self):
        from boxing_trainer.exceptions import CombinationError
        s = _session()
        with pytest.raises(CombinationError):
            s.reload()
