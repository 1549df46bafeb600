"""Sorting pipeline.

Pipeline shape:
- build one engine for the run
- read sources one at a time -> records -> accepted lines -> engine
- drain the engine into the output stream

Per-source failures are collected, not raised; running out of memory is
raised as ResourceExhaustion and ends the run.
"""

from __future__ import annotations
import contextlib
import logging
from dataclasses import dataclass, field
from typing import IO, Callable, ContextManager, Iterable, Iterator, Optional, Tuple

from .config import SortConfig
from .core.engine import Engine, build
from .core.shuffle import RandomState
from .errors import ResourceExhaustion, SourceUnavailable
from .normalize import accept_lines
from .records import read_records

logger = logging.getLogger(__name__)

Opener = Callable[[], ContextManager[IO[str]]]
Source = Tuple[str, Opener]


@dataclass
class RunResult:
    lines_read: int = 0
    lines_written: int = 0
    failures: list[SourceUnavailable] = field(default_factory=list)
    write_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.failures and self.write_error is None


def stream_source(name: str, stream: IO[str]) -> Source:
    """Wrap an already-open stream (e.g. stdin) so the pipeline won't close it."""
    return name, lambda: contextlib.nullcontext(stream)


def file_source(path: str, encoding: str = "utf-8") -> Source:
    return path, lambda: open(path, "r", encoding=encoding)


def _feed(engine: Engine, stream: Iterable[str], trim: bool, skip_blank: bool) -> Iterator[str]:
    for line in accept_lines(read_records(stream), trim=trim, skip_blank=skip_blank):
        engine.ingest(line)
        yield line


def ingest_source(engine: Engine, stream: Iterable[str], trim: bool = False, skip_blank: bool = False) -> int:
    """Feed every accepted line of one source into the engine."""
    return sum(1 for _ in _feed(engine, stream, trim, skip_blank))


def read_source(engine: Engine, source: Source, config: SortConfig) -> int:
    """Drain one source into the engine.

    Raises:
        SourceUnavailable: if the source cannot be opened or decoded. Its
            `lines_read` counts what was stored before the failure.
    """
    name, opener = source
    count = 0
    try:
        with opener() as fh:
            for _ in _feed(engine, fh, config.trim, config.skip_blank):
                count += 1
    except (OSError, UnicodeDecodeError) as ex:
        raise SourceUnavailable(name, str(ex), lines_read=count) from ex
    return count


def run(
    config: SortConfig,
    sources: Iterable[Source],
    sink: IO[str],
    random_state: Optional[RandomState] = None,
) -> RunResult:
    """Sort (or shuffle) all sources into `sink`.

    Raises:
        ResourceExhaustion
    """
    result = RunResult()
    try:
        engine = build(config, random_state)
        for source in sources:
            try:
                result.lines_read += read_source(engine, source, config)
            except SourceUnavailable as ex:
                result.lines_read += ex.lines_read
                logger.debug("skipping source: %s", ex)
                result.failures.append(ex)
                if not config.keep_going:
                    break

        try:
            result.lines_written = engine.finalize_and_emit(sink, flush_per_line=config.flush)
            sink.flush()
        except OSError as ex:
            result.write_error = str(ex)
    except MemoryError as ex:
        raise ResourceExhaustion("out of memory") from ex

    logger.debug("read %d lines, wrote %d", result.lines_read, result.lines_written)
    return result
