"""Digit / non-digit segmentation and run-by-run comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

DIGITS = frozenset("0123456789")
ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
TILDE = "~"


class Category(Enum):
    NON_DIGITS = "non_digits"
    DIGITS = "digits"


@dataclass(frozen=True)
class Segment:
    category: Category
    text: str

    @property
    def is_digits(self) -> bool:
        return self.category is Category.DIGITS


def segment(text: str) -> List[Segment]:
    """Split ``text`` into maximal runs of ASCII digits and non-digits.

    Joining the ``text`` of the returned segments gives back the input; two
    neighbouring segments never share a category. The empty string yields
    an empty list.
    """
    segments: List[Segment] = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or (text[i] in DIGITS) != (text[start] in DIGITS):
            category = Category.DIGITS if text[start] in DIGITS else Category.NON_DIGITS
            segments.append(Segment(category, text[start:i]))
            start = i
    return segments


def _char_rank(c: Optional[str], letters_first: bool) -> Tuple[int, int]:
    # None is end-of-run: above '~', below everything else
    if c == TILDE:
        return (0, 0)
    if c is None:
        return (1, 0)
    if letters_first and c not in ASCII_LETTERS:
        return (3, ord(c))
    return (2, ord(c))


def compare_non_digits(a: str, b: str, letters_first: bool = False) -> int:
    """Compare two non-digit runs character by character.

    ``~`` sorts below every other character and below the end of the run.
    Everything else is plain code point order, or, with ``letters_first``,
    ASCII letters before all other characters.
    """
    for i in range(max(len(a), len(b))):
        ca = a[i] if i < len(a) else None
        cb = b[i] if i < len(b) else None
        if ca == cb:
            continue
        ra, rb = _char_rank(ca, letters_first), _char_rank(cb, letters_first)
        return -1 if ra < rb else 1
    return 0


def compare_digits(a: str, b: str) -> int:
    """Compare two digit runs by numeric value, then by length.

    Values are compared without integer conversion (significant digit count
    first, then digit by digit) so arbitrarily long runs are exact. Equal
    values with more leading zeros sort after: ``7 < 07 < 007``.
    """
    sig_a, sig_b = a.lstrip("0"), b.lstrip("0")
    if len(sig_a) != len(sig_b):
        return -1 if len(sig_a) < len(sig_b) else 1
    if sig_a != sig_b:
        return -1 if sig_a < sig_b else 1
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return 0


def compare_runs(a: Optional[Segment], b: Optional[Segment], letters_first: bool = False) -> int:
    """Compare the segments found at the same position of two streams.

    ``None`` marks an exhausted stream and acts as an empty run of the other
    side's category.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1 if b.is_digits else compare_non_digits("", b.text, letters_first)
    if b is None:
        return 1 if a.is_digits else compare_non_digits(a.text, "", letters_first)
    if a.category is not b.category:
        return 1 if a.is_digits else -1
    if a.is_digits:
        return compare_digits(a.text, b.text)
    return compare_non_digits(a.text, b.text, letters_first)


def compare_segment_streams(a: List[Segment], b: List[Segment], letters_first: bool = False) -> int:
    for i in range(max(len(a), len(b))):
        seg_a = a[i] if i < len(a) else None
        seg_b = b[i] if i < len(b) else None
        cmp = compare_runs(seg_a, seg_b, letters_first)
        if cmp != 0:
            return cmp
    return 0
