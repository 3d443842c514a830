"""Domain models for bitflip.

Frozen dataclasses only: immutable value objects with no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class InvocationOptions:
    """Flags collected from the command line for a single run."""

    flip_even: bool = False
    """Emit the even-bit flip (``-e``)."""

    flip_odd: bool = False
    """Emit the odd-bit flip (``-f``)."""

    flip_all: bool = False
    """Emit the all-bit flip (``-a``)."""

    output: Path | None = None
    """Destination file (``-o``), or ``None`` for standard output."""


@dataclass(frozen=True, slots=True)
class FlipResult:
    """One labelled output line, e.g. ``Even bits flipped: 21840``."""

    label: str
    """Line prefix, e.g. ``Value`` or ``Odd bits flipped``."""

    value: int
    """Unsigned decimal result in [0, 65535]."""

    def render(self) -> str:
        """Return the line text without the trailing newline."""
        return f"{self.label}: {self.value}"
