"""Write a final line sequence to an output stream."""

from __future__ import annotations
from typing import IO, Iterable

from .records import render_record


def emit_lines(lines: Iterable[str], sink: IO[str], flush_per_line: bool = False) -> int:
    """Write each line plus a newline to `sink`; return how many were written.

    Write errors (OSError) propagate to the caller.
    """
    count = 0
    for line in lines:
        sink.write(render_record(line))
        if flush_per_line:
            sink.flush()
        count += 1
    return count
