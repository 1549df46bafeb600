"""
Shuffle Engine
Collect lines and release them in uniformly random order.

The random source is an explicit `RandomState` value handed to the engine,
not a module global. It still creates its generator lazily, on the first
draw, and guards that and every draw with a lock.
"""

from __future__ import annotations
import logging
import os
import random
import threading
from typing import IO, Iterator, Optional

from ..emit import emit_lines
from ..errors import InvariantViolation, ResourceExhaustion, UninitializedRandomState

logger = logging.getLogger(__name__)

_SEED_BYTES = 32


class RandomState:
    """
    Lazily seeded random number source, safe to share between threads.

    Args:
        seed: Fixed seed for reproducible permutations. When omitted the
            generator is seeded from os.urandom on first use.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng: Optional[random.Random] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._rng is not None

    def _ensure(self) -> random.Random:
        if self._rng is None:
            seed = self._seed
            if seed is None:
                seed = int.from_bytes(os.urandom(_SEED_BYTES), "big")
            self._rng = random.Random(seed)
            logger.debug("random state initialized (fixed seed: %s)", self._seed is not None)
        return self._rng

    def _draw(self, bound: int) -> int:
        if self._rng is None:
            raise UninitializedRandomState("random state used before initialization")
        return self._rng.randrange(bound)

    def next(self, bound: int) -> int:
        """Return a uniformly distributed integer in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        with self._lock:
            self._ensure()
            return self._draw(bound)


class ShuffleEngine:
    """
    Keeps lines in insertion order until `shuffle()` permutes them.

    Duplicates are always kept. `shuffle()` may run at most once, after all
    appends and before iteration.
    """

    def __init__(self, random_state: Optional[RandomState] = None):
        self.random_state = random_state or RandomState()
        self._lines: list[str] = []
        self._shuffled = False
        self._draining = False

    def __len__(self) -> int:
        return len(self._lines)

    def append(self, line: str) -> None:
        if self._shuffled or self._draining:
            raise InvariantViolation("append after shuffle or iteration")
        try:
            self._lines.append(line)
        except MemoryError as ex:
            raise ResourceExhaustion("out of memory while storing lines") from ex

    def ingest(self, line: str) -> None:
        self.append(line)

    def shuffle(self) -> None:
        """Permute the lines in place (Fisher-Yates)."""
        if self._shuffled:
            raise InvariantViolation("shuffle called twice")
        if self._draining:
            raise InvariantViolation("shuffle after iteration started")
        self._shuffled = True
        items = self._lines
        for i in range(len(items) - 1, 0, -1):
            j = self.random_state.next(i + 1)
            items[i], items[j] = items[j], items[i]

    def iterate(self) -> Iterator[str]:
        self._draining = True
        return iter(self._lines)

    def finalize_and_emit(self, sink: IO[str], flush_per_line: bool = False) -> int:
        self.shuffle()
        return emit_lines(self.iterate(), sink, flush_per_line)
