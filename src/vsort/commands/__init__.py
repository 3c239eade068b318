"""Command subpackage grouping individual vsort CLI commands."""
from .sort_cmd import run_sort  # noqa: F401
from .compare_cmd import run_compare  # noqa: F401
from .split_cmd import run_split  # noqa: F401
