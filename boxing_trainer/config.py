"""
Runtime configuration for boxing-trainer.

Values come from dataclass defaults, then environment variables, then
explicit overrides (the CLI passes its flags as overrides)::

    config = TrainerConfig.from_env(data_path="drills.txt")

Environment
───────────
BOXING_TRAINER_DATA       — path to the combinations file
BOXING_TRAINER_FIELDS     — fields per line: 5 (no link) or 6 (with link)
BOXING_TRAINER_LOG_LEVEL  — logging level name, e.g. DEBUG
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from boxing_trainer.exceptions import ConfigError

__all__ = ["TrainerConfig", "DEFAULT_DATA_PATH", "SUPPORTED_FIELD_COUNTS"]

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "./combinations.txt"

# 5 = description, distance, defense, faint, body
# 6 = the above plus a trailing link
SUPPORTED_FIELD_COUNTS = (5, 6)

_ENV_DATA      = "BOXING_TRAINER_DATA"
_ENV_FIELDS    = "BOXING_TRAINER_FIELDS"
_ENV_LOG_LEVEL = "BOXING_TRAINER_LOG_LEVEL"


@dataclass
class TrainerConfig:
    """Settings shared by the GUI and the CLI."""
    data_path:     str = DEFAULT_DATA_PATH
    field_count:   int = 6
    window_width:  int = 2000
    window_height: int = 800
    log_level:     str = "INFO"

    def __post_init__(self) -> None:
        if self.field_count not in SUPPORTED_FIELD_COUNTS:
            raise ConfigError(
                f"field_count must be one of {SUPPORTED_FIELD_COUNTS}, "
                f"got {self.field_count!r}"
            )
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigError(
                f"Invalid window size {self.window_width}x{self.window_height}"
            )
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "TrainerConfig":
        """
        Build a config from *environ* (default: os.environ) plus *overrides*.

        Overrides whose value is None are ignored, so argparse namespaces
        with unset optional flags can be passed straight through.

        Raises:
            ConfigError: A value is malformed or unsupported.
        """
        env = os.environ if environ is None else environ
        values: dict = {}

        if env.get(_ENV_DATA):
            values["data_path"] = env[_ENV_DATA]
        if env.get(_ENV_FIELDS):
            raw = env[_ENV_FIELDS]
            try:
                values["field_count"] = int(raw)
            except ValueError as exc:
                raise ConfigError(f"{_ENV_FIELDS} must be an integer, got {raw!r}") from exc
        if env.get(_ENV_LOG_LEVEL):
            values["log_level"] = env[_ENV_LOG_LEVEL]

        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigError(f"Unknown configuration key: {key}")
            if value is not None:
                values[key] = value

        config = cls(**values)
        logger.debug("Configuration: %s", config)
        return config
