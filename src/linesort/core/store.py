"""Ordered line storage.

One container type covers both set and multiset semantics; the `unique`
flag picks which. Lines are kept sorted on insertion (binary search into a
list), so draining is a plain walk.
"""

from __future__ import annotations
import bisect
import logging
from typing import IO, Iterator

from ..emit import emit_lines
from ..errors import InvariantViolation, ResourceExhaustion
from ..ordering import OrderingPolicy

logger = logging.getLogger(__name__)


class CollectionStore:
    """Lines in policy order, optionally with comparator-equal duplicates dropped.

    When `unique` is set the first line of each equivalence class wins; later
    equivalent lines (e.g. a different spelling under a case-insensitive
    policy) are discarded.
    """

    def __init__(self, policy: OrderingPolicy, unique: bool = False):
        self.policy = policy
        self.unique = unique
        self._key = policy.sort_key()
        self._lines: list[str] = []
        self._dropped = 0
        self._draining = False

    def __len__(self) -> int:
        return len(self._lines)

    def insert(self, line: str) -> bool:
        """Store `line`. Returns False if a unique store already had its equal."""
        if self._draining:
            raise InvariantViolation("insert after the store started draining")
        try:
            if self.unique:
                i = bisect.bisect_left(self._lines, self._key(line), key=self._key)
                if i < len(self._lines) and self.policy.compare(self._lines[i], line) == 0:
                    self._dropped += 1
                    return False
                self._lines.insert(i, line)
            else:
                # right of any equals: ties keep insertion order
                bisect.insort_right(self._lines, line, key=self._key)
        except MemoryError as ex:
            raise ResourceExhaustion("out of memory while storing lines") from ex
        return True

    def ingest(self, line: str) -> None:
        self.insert(line)

    def iterate(self) -> Iterator[str]:
        """Yield the stored lines in policy order. Single pass."""
        self._draining = True
        logger.debug("draining %d lines (%d duplicates dropped)", len(self._lines), self._dropped)
        return iter(self._lines)

    def finalize_and_emit(self, sink: IO[str], flush_per_line: bool = False) -> int:
        return emit_lines(self.iterate(), sink, flush_per_line)
