from __future__ import annotations
from vsort.commands.common import echo_raw
from vsort.suffix import split_suffix


def run_split(name: str):
    body, suffix = split_suffix(name)
    echo_raw(f"{body}\t{suffix}")
