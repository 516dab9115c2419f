"""
CLI entry point for boxing-trainer.

Usage
─────
  # Open the trainer window (default subcommand)
  python -m boxing_trainer --data ./combinations.txt gui

  # Print the combinations matching a filter, in file order
  python -m boxing_trainer list --distance long --defence yes

  # Validate the data file
  python -m boxing_trainer check

  # Print a shuffled drill of 10 combinations
  python -m boxing_trainer drill --count 10 --body no

Subcommands are implemented as standalone functions (cmd_gui, cmd_list,
cmd_check, cmd_drill) so they can be unit-tested without invoking argparse.
A data file that fails to load is fatal: the error is printed and the exit
code is 1.
"""

import argparse
import logging
import sys
from typing import Optional

from boxing_trainer.config import SUPPORTED_FIELD_COUNTS, TrainerConfig
from boxing_trainer.exceptions import BoxingTrainerError, CombinationError
from boxing_trainer.session import (
    DistanceSelection,
    Selection,
    TrainingSession,
    filter_combinations,
)

__all__ = ["build_parser", "cmd_gui", "cmd_list", "cmd_check", "cmd_drill", "main"]

logger = logging.getLogger(__name__)

_DISTANCE_CHOICES = [s.value.lower() for s in DistanceSelection]
_YES_NO_CHOICES   = [s.value.lower() for s in Selection]


# ── Argument parser ────────────────────────────────────────────────────────────


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--distance",
        choices=_DISTANCE_CHOICES,
        default="all",
        help="Distance filter (default: all)",
    )
    for facet in ("defence", "faint", "body"):
        parser.add_argument(
            f"--{facet}",
            choices=_YES_NO_CHOICES,
            default="all",
            help=f"{facet.capitalize()} filter (default: all)",
        )


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: gui | list | check | drill
    """
    parser = argparse.ArgumentParser(
        prog="boxing-trainer",
        description="Flashcard trainer for boxing combinations",
    )
    parser.add_argument(
        "--data",
        default=None,
        metavar="PATH",
        help="Combinations file (default: $BOXING_TRAINER_DATA or ./combinations.txt)",
    )
    parser.add_argument(
        "--fields",
        type=int,
        choices=list(SUPPORTED_FIELD_COUNTS),
        default=None,
        help="Fields per line: 5 (no link) or 6 (with link, default)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the trainer window")

    # ── list ──────────────────────────────────────────────────────────────
    lst = sub.add_parser("list", help="List combinations matching the filters")
    _add_filter_arguments(lst)

    # ── check ─────────────────────────────────────────────────────────────
    sub.add_parser("check", help="Validate the combinations file")

    # ── drill ─────────────────────────────────────────────────────────────
    drl = sub.add_parser("drill", help="Print a shuffled sequence of combinations")
    drl.add_argument(
        "--count",
        type=int,
        default=10,
        metavar="N",
        help="Number of combinations to print (default: 10)",
    )
    drl.add_argument(
        "--seed",
        type=int,
        default=None,
        metavar="SEED",
        help="Shuffle seed for a repeatable drill (default: wall clock)",
    )
    _add_filter_arguments(drl)

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_gui(session: TrainingSession, config: TrainerConfig) -> int:
    """Open the trainer window; returns the Qt exit code."""
    from boxing_trainer.gui import run_gui
    return run_gui(session, config)


def cmd_list(
    session: TrainingSession,
    distance: str = "all",
    defence: str = "all",
    faint: str = "all",
    body: str = "all",
) -> None:
    """Print the matching combinations in file order."""
    records = filter_combinations(
        session.all_records,
        DistanceSelection(distance.capitalize()),
        Selection(defence.capitalize()),
        Selection(faint.capitalize()),
        Selection(body.capitalize()),
    )
    if not records:
        print("0 combinations found.")
        return
    for number, rec in enumerate(records, start=1):
        facets = (
            f"{rec.distance.value:<5} defense={rec.defense.value:<3} "
            f"faint={rec.faint.value:<3} body={rec.body.value:<3}"
        )
        link = f"  {rec.url}" if rec.url else ""
        print(f"[{number:>3}]  {rec.description:<30} {facets}{link}")


def cmd_check(config: TrainerConfig) -> int:
    """Load the data file and report the result. Returns an exit code."""
    try:
        session = TrainingSession.from_file(config.data_path, config.field_count)
    except CombinationError as exc:
        print(f"ERROR {exc}", file=sys.stderr)
        return 1
    print(f"OK: {len(session.all_records)} combinations in {config.data_path}")
    return 0


def cmd_drill(
    session: TrainingSession,
    count: int = 10,
    seed: Optional[int] = None,
    distance: str = "all",
    defence: str = "all",
    faint: str = "all",
    body: str = "all",
) -> list[str]:
    """
    Print *count* combinations from a shuffled, filtered working set.

    The sequence wraps around once every matching combination has been
    shown, like pressing Next in the GUI.

    Returns:
        The printed lines.
    """
    session.set_distance_selection(distance)
    session.set_defence_selection(defence)
    session.set_faint_selection(faint)
    session.set_body_selection(body)
    session.reset_randomized(seed)

    if session.is_empty:
        print("0 combinations match the filters.")
        return []

    lines = []
    for _ in range(max(count, 0)):
        line = f"{session.display_number:<5} {session.description}"
        print(line)
        lines.append(line)
        session.advance()
    return lines


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        config = TrainerConfig.from_env(data_path=ns.data, field_count=ns.fields)
    except BoxingTrainerError as exc:
        print(f"ERROR {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if ns.debug else logging.getLevelName(config.log_level)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    subcommand = ns.subcommand or "gui"

    if subcommand == "check":
        return cmd_check(config)

    # Without data there is no valid state: fail fast.
    try:
        session = TrainingSession.from_file(config.data_path, config.field_count)
    except CombinationError as exc:
        logger.debug("initial load failed", exc_info=True)
        print(f"ERROR {exc}", file=sys.stderr)
        return 1

    if subcommand == "list":
        cmd_list(session, ns.distance, ns.defence, ns.faint, ns.body)
        return 0

    if subcommand == "drill":
        cmd_drill(
            session,
            count=ns.count,
            seed=ns.seed,
            distance=ns.distance,
            defence=ns.defence,
            faint=ns.faint,
            body=ns.body,
        )
        return 0

    return cmd_gui(session, config)


if __name__ == "__main__":
    raise SystemExit(main())
