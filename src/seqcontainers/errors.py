from __future__ import annotations


class SequenceError(Exception):
    """Base class for errors raised by the sequence containers."""


class InvalidArgument(SequenceError, ValueError):
    pass


class IndexOutOfRange(SequenceError, IndexError):
    pass


class ConcurrentStructuralChange(SequenceError, RuntimeError):
    """A container was structurally modified while a derived value was computed."""
