from __future__ import annotations

"""Exception types raised by seqalign."""


class SeqAlignError(Exception):
    """Base class for seqalign failures."""


class InputReadError(SeqAlignError, EOFError):
    """Raised when a sequence line cannot be read from the input stream."""


class TracebackError(SeqAlignError, IndexError):
    """Raised when the traceback walks off a sequence or finds no consistent move."""
