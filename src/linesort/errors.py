"""Errors used by the sorting pipeline."""

class LineSortError(Exception):
    """Base error for this package."""


class ConfigError(LineSortError):
    """Raised when a combination of options cannot be honored."""


class SourceUnavailable(LineSortError):
    """Raised when an input source cannot be opened or read.

    Recoverable: the pipeline records it and moves on (or stops) per source.
    """

    def __init__(self, source: str, reason: str, lines_read: int = 0):
        super().__init__(f"failed to read input {source!r}: {reason}")
        self.source = source
        self.reason = reason
        # lines stored before the failure; they stay in the engine
        self.lines_read = lines_read


class ResourceExhaustion(LineSortError):
    """Raised when memory runs out while storing or permuting lines. Fatal."""


class InvariantViolation(LineSortError):
    """Raised when an engine is driven out of order (a programming error)."""


class UninitializedRandomState(InvariantViolation):
    """Raised when a draw reaches the generator before it was created."""
