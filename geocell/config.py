"""Environment driven settings for the CLI and the Geohash helper."""

import logging
import os
from dataclasses import dataclass

from geocell.exceptions import ConfigError, PrecisionError

MIN_PRECISION = 1
MAX_PRECISION = 12  # 12 is standard max precision


@dataclass
class Settings:
    default_precision: int = 5
    log_level: str = "WARNING"


def check_precision(precision: int) -> int:
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise PrecisionError(
            f"Precision must be between {MIN_PRECISION} and {MAX_PRECISION}, got {precision}"
        )
    return precision


def load_settings() -> Settings:
    """Read GEOCELL_* environment variables, falling back to defaults."""
    raw_precision = os.getenv("GEOCELL_DEFAULT_PRECISION", "5")
    try:
        precision = int(raw_precision)
    except ValueError:
        raise PrecisionError(
            f"GEOCELL_DEFAULT_PRECISION must be an integer, got {raw_precision!r}"
        ) from None

    log_level = os.getenv("GEOCELL_LOG_LEVEL", "WARNING").upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"GEOCELL_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        default_precision=check_precision(precision),
        log_level=log_level,
    )
