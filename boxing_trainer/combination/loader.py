"""
Combination loader — parses the `;`-delimited combinations file.

File format (one record per line)::

    # comment
    1-1-2-step_back-2; Long;  Yes;  No;  No; https://example.com

Fields: description; distance (long|short); defense, faint, body (yes|no);
optional link (only when field_count == 6).  Tokens are case-insensitive
and surrounding whitespace is ignored.  There is no quoting or escaping.

The first malformed line aborts the load; there is no partial result.
"""

import logging
import os
from pathlib import Path
from typing import Optional, TypeVar, Union

from boxing_trainer.exceptions import CombinationIOError, CombinationParseError
from .models import Combination, Distance, YesNo

__all__ = ["load_combinations", "parse_combination", "FIELD_COUNT", "DELIMITER", "COMMENT"]

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────

FIELD_COUNT = 6
DELIMITER   = ";"
COMMENT     = "#"

_SHORT = "short"
_LONG  = "long"
_YES   = "yes"
_NO    = "no"

T = TypeVar("T")


# ── Public API ────────────────────────────────────────────────────────────────

def load_combinations(
    path: Union[str, Path],
    field_count: int = FIELD_COUNT,
) -> list[Combination]:
    """
    Read every combination from the file at *path*.

    Args:
        path:        Combinations file.
        field_count: 6 when lines carry a trailing link field, 5 otherwise.

    Returns:
        Combinations in file order.

    Raises:
        CombinationIOError:    The file could not be opened or read.
        CombinationParseError: A non-comment line is malformed.
    """
    _check_field_count(field_count)
    file_path = Path(path)
    logger.debug("CWD is %s, path is %s", os.getcwd(), file_path)

    combinations: list[Combination] = []
    try:
        with file_path.open("r", encoding="utf-8") as fh:
            for raw in fh:
                line = raw.strip()
                if not line or line.startswith(COMMENT):
                    continue
                combinations.append(parse_combination(line, field_count))
    except (OSError, UnicodeDecodeError) as exc:
        raise CombinationIOError(exc) from exc

    logger.info("Loaded %d combinations from %s", len(combinations), file_path)
    return combinations


def parse_combination(line: str, field_count: int = FIELD_COUNT) -> Combination:
    """
    Parse a single data line into a Combination.

    Error messages quote the offending token and the whole line.  For the
    yes/no facets the token is quoted as written, leading whitespace
    included.

    Raises:
        CombinationParseError: Wrong field count or unrecognised token.
    """
    _check_field_count(field_count)
    fields = line.split(DELIMITER)
    if len(fields) != field_count:
        raise CombinationParseError(
            f"Expect {field_count} elements delimited by {DELIMITER} in {_quote(line)}",
            line,
        )

    description = fields[0].strip()

    distance_token = fields[1].strip()
    if distance_token.lower() == _LONG:
        distance = Distance.LONG
    elif distance_token.lower() == _SHORT:
        distance = Distance.SHORT
    else:
        raise CombinationParseError(
            f"Unknown distance {_quote(distance_token)} in {_quote(line)}", line
        )

    defense = _parse_facet("defense", fields[2], line)
    faint   = _parse_facet("faint",   fields[3], line)
    body    = _parse_facet("body",    fields[4], line)

    url: Optional[str] = None
    if field_count == 6:
        url = fields[5].strip() or None

    return Combination(
        description=description,
        distance=distance,
        defense=defense,
        faint=faint,
        body=body,
        url=url,
    )


# ── Private helpers ───────────────────────────────────────────────────────────

def _parse_facet(name: str, field: str, line: str) -> YesNo:
    value = _parse_yes_no(field, YesNo.YES, YesNo.NO)
    if value is None:
        raise CombinationParseError(f"Unknown {name} {_quote(field)} in {_quote(line)}", line)
    return value


def _parse_yes_no(field: str, yes: T, no: T) -> Optional[T]:
    token = field.strip().lower()
    if token == _YES:
        return yes
    if token == _NO:
        return no
    return None


def _check_field_count(field_count: int) -> None:
    if field_count not in (5, 6):
        raise ValueError(f"field_count must be 5 or 6, got {field_count!r}")


def _quote(text: str) -> str:
    """Double-quote *text* for an error message, escaping \\, " and tabs."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\t", "\\t")
    return f'"{escaped}"'
