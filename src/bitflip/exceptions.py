"""Custom exception hierarchy for bitflip.

Every user-visible error condition maps to a subclass of
:class:`BitflipError`.  Raw ``OSError`` from opening, writing, or
closing the output stream must not escape the infrastructure layer; it is re-raised as
:class:`OutputOpenError` or :class:`OutputWriteError`.

Hierarchy
---------
BitflipError
├── UsageError
├── ValidationError
├── OutputOpenError
└── OutputWriteError
"""

from __future__ import annotations


class BitflipError(Exception):
    """Base exception for all bitflip errors.

    The CLI error boundary renders these as a clean one-line message
    (plus optional hint) and exits with status 1.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ------------------------------------------------------------

class UsageError(BitflipError):
    """Raised for an unrecognized flag or a wrong number of positionals."""


class ValidationError(BitflipError):
    """Raised when ``intval`` is not a base-10 integer in range."""


# --- Output ------------------------------------------------------------------

class OutputOpenError(BitflipError):
    """Raised when the ``-o`` output file cannot be opened for writing."""


class OutputWriteError(BitflipError):
    """Raised when writing, flushing, or closing the output stream fails."""
