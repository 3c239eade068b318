"""vsort command line: version-sort lines the way ``sort -V`` does."""

from __future__ import annotations
from typing import List, Optional
import typer
from vsort.commands import run_compare, run_sort, run_split

app = typer.Typer(help="Sort and compare strings in version order (like GNU sort -V).", no_args_is_help=True)

LETTERS_FIRST_HELP = "Sort ASCII letters before other characters (GNU collation). Defaults to $VSORT_LETTERS_FIRST."
LOG_LEVEL_HELP = "Logging level. Defaults to $VSORT_LOG_LEVEL or WARNING."


@app.command("sort")
def sort_command(
    files: Optional[List[str]] = typer.Argument(None, help="Files to read; '-' or none reads stdin."),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse the result."),
    unique: bool = typer.Option(False, "--unique", "-u", help="Drop duplicate lines."),
    letters_first: Optional[bool] = typer.Option(None, "--letters-first/--ordinal", help=LETTERS_FIRST_HELP),
    log_level: Optional[str] = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
):
    """Print lines from FILES in version order."""
    run_sort(files, reverse, unique, letters_first, log_level)


@app.command("compare")
def compare_command(
    a: str = typer.Argument(..., help="Left-hand string."),
    b: str = typer.Argument(..., help="Right-hand string."),
    letters_first: Optional[bool] = typer.Option(None, "--letters-first/--ordinal", help=LETTERS_FIRST_HELP),
    log_level: Optional[str] = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
):
    """Print 'less', 'equal' or 'greater' for A against B."""
    run_compare(a, b, letters_first, log_level)


@app.command("split")
def split_command(name: str = typer.Argument(..., help="File name to split.")):
    """Print the body and suffix of NAME, tab-separated."""
    run_split(name)


def main():
    app()


if __name__ == "__main__":
    main()
