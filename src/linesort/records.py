"""Line-oriented record splitting.

A "record" is one line of an input source with its terminator removed:
    hello world\\n   ->  RawLine("hello world", terminated=True)

The last record of a source may hit end-of-stream before any terminator.
Such a record is marked `terminated=False`; the pipeline treats it as
incomplete data and never stores it.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

# a CRLF pair is one terminator; a lone CR or LF is another
_TERMINATOR = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class RawLine:
    text: str
    terminated: bool = True


def read_records(stream: Iterable[str]) -> Iterator[RawLine]:
    """Split an already-open, already-decoded text stream into records.

    Works for streams opened with universal newlines (the default) and with
    `newline=""`, where "\\r" terminators are passed through untranslated.
    """
    for chunk in stream:
        parts = _TERMINATOR.split(chunk)
        for part in parts[:-1]:
            yield RawLine(text=part, terminated=True)
        if parts[-1]:
            yield RawLine(text=parts[-1], terminated=False)


def render_record(line: str) -> str:
    """Render a stored line back to its output form."""
    return line + "\n"
