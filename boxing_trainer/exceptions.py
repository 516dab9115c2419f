"""
Project-wide custom exception hierarchy.
All modules raise subclasses of BoxingTrainerError — never bare Exception.
"""

from typing import Optional

__all__ = [
    "BoxingTrainerError",
    "CombinationError",
    "CombinationIOError",
    "CombinationParseError",
    "ConfigError",
]


class BoxingTrainerError(Exception):
    """Root exception for all boxing-trainer errors."""


# ── Combination loading ───────────────────────────────────────────────────────

class CombinationError(BoxingTrainerError):
    """Base class for failures while loading the combinations file."""


class CombinationIOError(CombinationError):
    """Raised when the combinations file cannot be opened or read."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"I/O error: {self.cause}"


class CombinationParseError(CombinationError):
    """Raised when a line of the combinations file is malformed."""

    def __init__(self, message: str, line: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


# ── Configuration ─────────────────────────────────────────────────────────────

class ConfigError(BoxingTrainerError):
    """Raised when a configuration value is invalid."""
