"""Resolved run configuration.

Built once from parsed command-line options and then handed to the core.
Option combinations that make no sense together are rejected here, not in
the core.
"""

from __future__ import annotations
import argparse
import codecs
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigError
from .ordering import BaseOrdering, OrderingPolicy


@dataclass(frozen=True)
class SortConfig:
    ordering: OrderingPolicy = field(default_factory=OrderingPolicy)
    unique: bool = False
    shuffle: bool = False
    trim: bool = False
    skip_blank: bool = False
    flush: bool = False
    keep_going: bool = False
    encoding: str = "utf-8"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as ex:
            raise ConfigError(f"unknown encoding: {self.encoding!r}") from ex
        if not self.shuffle:
            return
        if self.unique or self.ordering.reverse or self.ordering.base is not BaseOrdering.LEXICOGRAPHIC:
            raise ConfigError("--shuffle cannot be combined with --unique, --reverse or an ordering option")

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "SortConfig":
        ordering = OrderingPolicy.from_flags(
            natural=ns.natural,
            ignore_case=ns.ignore_case,
            locale_logical=ns.locale_logical,
            reverse=ns.reverse,
        )
        return cls(
            ordering=ordering,
            unique=ns.unique,
            shuffle=ns.shuffle,
            trim=ns.trim,
            skip_blank=ns.skip_blank,
            flush=ns.force_flush,
            keep_going=ns.keep_going,
            encoding=ns.encoding,
            seed=ns.seed,
        )
