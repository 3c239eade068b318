"""vsort runtime settings - environment variables and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_LETTERS_FIRST = "VSORT_LETTERS_FIRST"
ENV_LOG_LEVEL = "VSORT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    letters_first: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def load_env(root: Path) -> bool:
    """Load ``root/.env`` into the process environment if present.

    Variables already set in the environment win over the file.
    """
    env_file = root / ".env"
    if not env_file.is_file():
        return False
    return load_dotenv(env_file, override=False)


def parse_bool(raw: Optional[str], name: str, default: bool = False) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} '{raw}', defaulting to '{str(default).lower()}'")
    return default


def load_settings(
    letters_first: Optional[bool] = None,
    log_level: Optional[str] = None,
    root: Optional[Path] = None,
) -> Settings:
    """Resolve settings.

    Priority: explicit argument > environment variable > .env file > default.
    """
    load_env(root or Path.cwd())
    if letters_first is None:
        letters_first = parse_bool(os.getenv(ENV_LETTERS_FIRST), ENV_LETTERS_FIRST)
    if not log_level:
        log_level = os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    return Settings(letters_first=letters_first, log_level=log_level.strip().upper())
