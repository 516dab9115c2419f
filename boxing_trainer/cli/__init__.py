"""
cli — command-line interface for boxing-trainer.

Entry points
────────────
  python -m boxing_trainer   (via boxing_trainer/__main__.py)
  boxing-trainer             (via pyproject.toml [project.scripts])

Subcommands: gui | list | check | drill
"""

from boxing_trainer.cli.main import (
    build_parser,
    cmd_check,
    cmd_drill,
    cmd_gui,
    cmd_list,
    main,
)

__all__ = ["build_parser", "cmd_gui", "cmd_list", "cmd_check", "cmd_drill", "main"]
