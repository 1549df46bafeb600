"""Natural ("human") string order.

Digit runs compare as numbers, everything else character by character:

    lexicographic: file1, file10, file2
    natural:       file1, file2, file10

Leading zeros carry no weight, so "file02" and "file2" are equal. Only
ASCII 0-9 count as digits.
"""

from __future__ import annotations
from typing import Callable

CharCompare = Callable[[str, str], int]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _plain_chars(x: str, y: str) -> int:
    return (x > y) - (x < y)


def _digit_run_end(s: str, i: int) -> int:
    while i < len(s) and _is_digit(s[i]):
        i += 1
    return i


def _compare_digit_runs(x: str, y: str) -> int:
    """Compare two digit runs by magnitude."""
    x = x.lstrip("0") or "0"
    y = y.lstrip("0") or "0"
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1
    return (x > y) - (x < y)


def compare_with(a: str, b: str, char_compare: CharCompare) -> int:
    """Natural comparison of `a` and `b` using `char_compare` for non-digits."""
    i = j = 0
    while i < len(a) and j < len(b):
        ca, cb = a[i], b[j]
        if _is_digit(ca) and _is_digit(cb):
            i_end = _digit_run_end(a, i)
            j_end = _digit_run_end(b, j)
            result = _compare_digit_runs(a[i:i_end], b[j:j_end])
            if result:
                return result
            i, j = i_end, j_end
            continue
        result = _sign(char_compare(ca, cb))
        if result:
            return result
        i += 1
        j += 1

    a_done = i >= len(a)
    b_done = j >= len(b)
    if a_done and b_done:
        return 0
    return -1 if a_done else 1


def natural_compare(a: str, b: str) -> int:
    """Three-way natural comparison, case-sensitive."""
    return compare_with(a, b, _plain_chars)


def natural_compare_ci(a: str, b: str) -> int:
    """Three-way natural comparison ignoring character case.

    Both strings are case-folded whole before the walk, so "straße2" and
    "STRASSE2" are equal.
    """
    return compare_with(a.casefold(), b.casefold(), _plain_chars)
