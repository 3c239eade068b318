"""Shared helpers for vsort CLI commands."""

from __future__ import annotations
from typing import Optional
import logging
import sys
from vsort.config import Settings, load_settings
from vsort.logging_utils import configure_logging
from vsort.versioning import VersionComparator

logger = logging.getLogger(__name__)


def setup(letters_first: Optional[bool], log_level: Optional[str]) -> Settings:
    """Resolve settings and configure logging for one command invocation."""
    settings = load_settings(letters_first=letters_first, log_level=log_level)
    configure_logging(settings.log_level)
    logger.debug("Resolved settings: %s", settings)
    return settings


def build_comparator(settings: Settings) -> VersionComparator:
    return VersionComparator(letters_first=settings.letters_first)


def echo_raw(text: str) -> None:
    """Write one line to stdout, restoring undecodable input bytes verbatim."""
    out = sys.stdout.buffer
    out.write(text.encode("utf-8", errors="surrogateescape") + b"\n")
    out.flush()
