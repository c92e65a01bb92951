"""Runtime settings read from the environment (a .env file is merged in by the CLI)."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from snowcard.models import SNOWFLAKE_COUNT

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """A settings variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Defaults the command line falls back to."""

    flake_count: int = SNOWFLAKE_COUNT  # SNOWCARD_FLAKES
    seed: int | None = None  # SNOWCARD_SEED; None = seed from the clock
    log_level: str = "WARNING"  # SNOWCARD_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Variables to read. Defaults to ``os.environ``.

    Returns:
        Settings with unset variables left at their defaults.

    Raises:
        ConfigError: If a variable is malformed or out of range.
    """
    if environ is None:
        environ = os.environ

    flakes = _int(environ, "SNOWCARD_FLAKES")
    if flakes is not None and flakes < 0:
        raise ConfigError(f"SNOWCARD_FLAKES must be >= 0, got {flakes}")

    seed = _int(environ, "SNOWCARD_SEED")
    if seed is not None and seed < 0:
        raise ConfigError(f"SNOWCARD_SEED must be >= 0, got {seed}")

    level = environ.get("SNOWCARD_LOG_LEVEL", "").strip().upper() or "WARNING"
    if level not in _LEVELS:
        raise ConfigError(
            f"SNOWCARD_LOG_LEVEL must be one of {', '.join(_LEVELS)}, got {level!r}"
        )

    return Settings(
        flake_count=SNOWFLAKE_COUNT if flakes is None else flakes,
        seed=seed,
        log_level=level,
    )
