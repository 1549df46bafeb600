"""Engine selection: one ordered store or one shuffle engine per run."""

from __future__ import annotations
from typing import Optional, Union

from ..config import SortConfig
from .shuffle import RandomState, ShuffleEngine
from .store import CollectionStore

Engine = Union[CollectionStore, ShuffleEngine]


def build(config: SortConfig, random_state: Optional[RandomState] = None) -> Engine:
    """Create the engine a run needs.

    A shuffle run gets a ShuffleEngine (seeded from `config.seed` unless a
    RandomState is passed in); everything else gets a CollectionStore.
    """
    if config.shuffle:
        return ShuffleEngine(random_state or RandomState(config.seed))
    return CollectionStore(config.ordering, unique=config.unique)
