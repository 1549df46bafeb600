"""Ordering policies.

An ordering policy decides how two lines compare. It is a plain value:
- a base comparator (one of a handful of kinds)
- a direction flag

Descending order is the ascending three-way result negated, never a
separate comparator.
"""

from __future__ import annotations
import enum
import locale
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable

from .natural import compare_with, natural_compare, natural_compare_ci


Comparator = Callable[[str, str], int]


class BaseOrdering(enum.Enum):
    LEXICOGRAPHIC = "lexicographic"
    CASE_INSENSITIVE = "case-insensitive"
    NATURAL = "natural"
    NATURAL_CASE_INSENSITIVE = "natural-case-insensitive"
    LOCALE_LOGICAL = "locale-logical"


def _lexicographic(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _case_insensitive(a: str, b: str) -> int:
    return _lexicographic(a.casefold(), b.casefold())


def _collate_chars(x: str, y: str) -> int:
    # uses whatever LC_COLLATE the process already has
    return locale.strcoll(x, y)


def _locale_logical(a: str, b: str) -> int:
    return compare_with(a.casefold(), b.casefold(), _collate_chars)


_COMPARATORS: dict[BaseOrdering, Comparator] = {
    BaseOrdering.LEXICOGRAPHIC: _lexicographic,
    BaseOrdering.CASE_INSENSITIVE: _case_insensitive,
    BaseOrdering.NATURAL: natural_compare,
    BaseOrdering.NATURAL_CASE_INSENSITIVE: natural_compare_ci,
    BaseOrdering.LOCALE_LOGICAL: _locale_logical,
}


def compile_comparator(base: BaseOrdering) -> Comparator:
    """Return the ascending three-way comparator for a base ordering.

    Supported kinds:
    - LEXICOGRAPHIC: code point order
    - CASE_INSENSITIVE: code point order after case folding
    - NATURAL / NATURAL_CASE_INSENSITIVE: digit runs compare as numbers
    - LOCALE_LOGICAL: natural order, case-insensitive, letters collated by
      the current locale

    Case-insensitive kinds fold whole strings, so "straße" matches "STRASSE".
    """
    try:
        return _COMPARATORS[base]
    except (KeyError, TypeError):
        raise ValueError(f"unknown ordering: {base!r}") from None


@dataclass(frozen=True)
class OrderingPolicy:
    """How lines compare for one run. Never changes once a store is built."""
    base: BaseOrdering = BaseOrdering.LEXICOGRAPHIC
    reverse: bool = False
    _cmp: Comparator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp", compile_comparator(self.base))

    @classmethod
    def from_flags(
        cls,
        natural: bool = False,
        ignore_case: bool = False,
        locale_logical: bool = False,
        reverse: bool = False,
    ) -> "OrderingPolicy":
        if locale_logical:
            base = BaseOrdering.LOCALE_LOGICAL
        elif natural:
            base = BaseOrdering.NATURAL_CASE_INSENSITIVE if ignore_case else BaseOrdering.NATURAL
        else:
            base = BaseOrdering.CASE_INSENSITIVE if ignore_case else BaseOrdering.LEXICOGRAPHIC
        return cls(base=base, reverse=reverse)

    def compare(self, a: str, b: str) -> int:
        result = self._cmp(a, b)
        return -result if self.reverse else result

    def precedes(self, a: str, b: str) -> bool:
        """True iff `a` must sort strictly before `b`."""
        return self.compare(a, b) < 0

    def sort_key(self):
        """A key function for `sorted`/`bisect` honoring this policy."""
        return cmp_to_key(self.compare)
