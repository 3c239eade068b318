"""GNU ``sort -V`` style version comparison for strings.

``compare(a, b)`` returns an :class:`Ordering` (an ``IntEnum`` of -1/0/1) and
``sort(items)`` sorts a list in place with it::

    >>> names = ["a.txt", "b 1.txt", "b 10.txt", "b 11.txt", "b 5.txt", "Ssm.txt"]
    >>> sort(names)
    >>> names
    ['Ssm.txt', 'a.txt', 'b 1.txt', 'b 5.txt', 'b 10.txt', 'b 11.txt']
"""

from __future__ import annotations

import functools
import logging
from enum import IntEnum
from typing import Iterable, List, Optional

from vsort.segments import compare_segment_streams, segment
from vsort.suffix import split_suffix

logger = logging.getLogger(__name__)

# Sort before everything else, in this order.
SPECIAL_NAMES = ("", ".", "..")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Ordering":
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


class VersionComparator:
    """Total order over strings following version-sort rules.

    Instances hold no state besides the collation flag, so one comparator can
    be shared freely between threads.
    """

    def __init__(self, letters_first: bool = False):
        self.letters_first = letters_first

    def __repr__(self) -> str:
        return f"VersionComparator(letters_first={self.letters_first!r})"

    def compare(self, a: str, b: str) -> Ordering:
        special = _compare_special(a, b)
        if special is not None:
            return special

        # Hidden names first. When both are hidden, compare without the dot.
        a_hidden, b_hidden = a.startswith("."), b.startswith(".")
        if a_hidden != b_hidden:
            return Ordering.LESS if a_hidden else Ordering.GREATER
        if a_hidden:
            a, b = a[1:], b[1:]

        a_split, b_split = split_suffix(a), split_suffix(b)
        cmp = self.compare_text(a_split.body, b_split.body)
        if cmp == 0:
            cmp = self.compare_text(a_split.suffix, b_split.suffix)
        if cmp == 0 and a != b:
            cmp = -1 if a < b else 1
        return Ordering.of(cmp)

    def compare_text(self, a: str, b: str) -> int:
        """Structural comparison of two strings, no suffix handling."""
        return compare_segment_streams(segment(a), segment(b), self.letters_first)

    def key(self):
        return functools.cmp_to_key(self.compare)

    __call__ = compare


def _compare_special(a: str, b: str) -> Optional[Ordering]:
    a_rank = SPECIAL_NAMES.index(a) if a in SPECIAL_NAMES else None
    b_rank = SPECIAL_NAMES.index(b) if b in SPECIAL_NAMES else None
    if a_rank is None and b_rank is None:
        return None
    if a_rank is None:
        return Ordering.GREATER
    if b_rank is None:
        return Ordering.LESS
    return Ordering.of(a_rank - b_rank)


DEFAULT_COMPARATOR = VersionComparator()


def compare(a: str, b: str) -> Ordering:
    """Return LESS, EQUAL or GREATER for ``a`` against ``b`` in version order."""
    return DEFAULT_COMPARATOR.compare(a, b)


sort_key = functools.cmp_to_key(compare)


def sort(items: List[str], *, reverse: bool = False, comparator: Optional[VersionComparator] = None) -> None:
    """Sort ``items`` in place in version order."""
    comparator = comparator or DEFAULT_COMPARATOR
    logger.debug("Version-sorting %d item(s) with %r", len(items), comparator)
    items.sort(key=comparator.key(), reverse=reverse)


def sorted_versions(
    items: Iterable[str], *, reverse: bool = False, comparator: Optional[VersionComparator] = None
) -> List[str]:
    result = list(items)
    sort(result, reverse=reverse, comparator=comparator)
    return result


__all__ = [
    "Ordering",
    "VersionComparator",
    "compare",
    "sort",
    "sort_key",
    "sorted_versions",
]
