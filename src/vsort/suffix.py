"""Trailing file-extension detection.

A suffix is a chain of one or more components, each being a ``.`` followed by
an ASCII letter or ``~`` and then any number of ASCII letters, digits or
``~``, running up to the end of the string. This is the extension grammar
GNU ``sort -V`` uses (``(\\.[A-Za-z~][A-Za-z0-9~]*)*$``), scanned by hand
from the right instead of with a regex.

Examples::

    hello-8.0.12.tar.gz -> ("hello-8.0.12", ".tar.gz")
    hello.foobar65      -> ("hello", ".foobar65")
    a.#$%.txt           -> ("a.#$%", ".txt")
    a.#$%               -> ("a.#$%", "")
    .bashrc             -> (".bashrc", "")
"""

from __future__ import annotations

from typing import NamedTuple

from vsort.segments import ASCII_LETTERS, DIGITS, TILDE

EXTENSION_START_CHARS = ASCII_LETTERS | {TILDE}
EXTENSION_CHARS = EXTENSION_START_CHARS | DIGITS


class SuffixSplit(NamedTuple):
    body: str
    suffix: str


def split_suffix(text: str) -> SuffixSplit:
    """Split ``text`` into ``(body, suffix)`` with ``body + suffix == text``.

    The longest matching extension chain is taken. A dot at index 0 never
    starts a suffix, so hidden names keep their leading dot in the body.
    """
    split_at = len(text)
    component_end = len(text)
    i = len(text) - 1
    while i > 0:
        c = text[i]
        if c == ".":
            if i + 1 == component_end or text[i + 1] not in EXTENSION_START_CHARS:
                break
            split_at = i
            component_end = i
        elif c not in EXTENSION_CHARS:
            break
        i -= 1
    return SuffixSplit(text[:split_at], text[split_at:])
