"""Core layer — pure bit manipulation and result formatting.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O.
* No imports from ``cli`` or ``infra``.
"""

from bitflip.core.bit_ops import (
    MAX_VALUE,
    MIN_VALUE,
    FlipMask,
    compute_results,
    flip,
    format_lines,
    parse_value,
)
from bitflip.core.models import FlipResult, InvocationOptions

__all__: list[str] = [
    "MAX_VALUE",
    "MIN_VALUE",
    "FlipMask",
    "FlipResult",
    "InvocationOptions",
    "compute_results",
    "flip",
    "format_lines",
    "parse_value",
]
