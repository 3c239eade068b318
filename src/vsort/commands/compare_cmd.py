from __future__ import annotations
from typing import Optional
import typer
from vsort.commands.common import build_comparator, setup


def run_compare(a: str, b: str, letters_first: Optional[bool], log_level: Optional[str]):
    settings = setup(letters_first, log_level)
    result = build_comparator(settings).compare(a, b)
    typer.echo(result.name.lower())
