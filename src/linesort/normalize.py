"""Line normalization.

Pipeline shape for one source:
- split the stream into records
- drop a truncated final record
- trim (optional)
- drop blank lines (optional)

"Whitespace" here is wider than `str.strip()`: any Unicode whitespace or
control character counts.
"""

from __future__ import annotations
import unicodedata
from typing import Iterable, Iterator

from .records import RawLine


def is_whitespace(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch) == "Cc"


def trim_line(line: str) -> str:
    """Remove leading/trailing whitespace and control characters."""
    start = 0
    end = len(line)
    while start < end and is_whitespace(line[start]):
        start += 1
    while end > start and is_whitespace(line[end - 1]):
        end -= 1
    return line[start:end]


def normalize_line(line: str, trim: bool) -> str:
    return trim_line(line) if trim else line


def is_blank(line: str) -> bool:
    """True if the line holds nothing but whitespace/control characters."""
    return all(is_whitespace(ch) for ch in line)


def accept_lines(records: Iterable[RawLine], trim: bool = False, skip_blank: bool = False) -> Iterator[str]:
    """Yield the normalized lines of one source that should be stored."""
    for rec in records:
        if not rec.terminated:
            continue
        line = normalize_line(rec.text, trim)
        if skip_blank and is_blank(line):
            continue
        yield line
