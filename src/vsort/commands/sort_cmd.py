from __future__ import annotations
from pathlib import Path
from typing import Iterator, List, Optional
import logging
import sys
import typer
from vsort.commands.common import build_comparator, echo_raw, setup
from vsort.versioning import sort

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def run_sort(
    files: Optional[List[str]],
    reverse: bool,
    unique: bool,
    letters_first: Optional[bool],
    log_level: Optional[str],
):
    settings = setup(letters_first, log_level)
    comparator = build_comparator(settings)

    lines = list(_read_lines(files or [STDIN_MARKER]))
    if unique:
        lines = list(dict.fromkeys(lines))
    sort(lines, reverse=reverse, comparator=comparator)
    logger.info("Sorted %d line(s)", len(lines))
    for line in lines:
        echo_raw(line)


def _read_lines(sources: List[str]) -> Iterator[str]:
    for source in sources:
        if source == STDIN_MARKER:
            raw = sys.stdin.buffer.read()
            yield from raw.decode("utf-8", errors="surrogateescape").splitlines()
            continue
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            typer.echo(f"Failed to read {source}: {e}", err=True)
            raise typer.Exit(code=2)
        yield from text.splitlines()
