"""Pure bit-flip logic: validation, masking, and line formatting.

Every flip is computed from the *original* value.  Flips are never
chained, so ``-e -f`` yields ``v ^ 0x5555`` and ``v ^ 0xAAAA`` rather than
``v ^ 0x5555 ^ 0xAAAA``.

Emission order is fixed by :class:`FlipMask` declaration order:
original, even, odd, all.
"""

from __future__ import annotations

import re
from enum import Enum

from bitflip.core.models import FlipResult, InvocationOptions
from bitflip.exceptions import ValidationError

MIN_VALUE: int = 1
MAX_VALUE: int = 20000

WORD_MASK: int = 0xFFFF
"""All 16 bits set; every result is confined to this width."""

_DIGITS = re.compile(r"[0-9]+")


class FlipMask(Enum):
    """16-bit XOR masks, declared in output order."""

    EVEN = (0x5555, "Even bits flipped")
    ODD = (0xAAAA, "Odd bits flipped")
    ALL = (0xFFFF, "All bits flipped")

    def __init__(self, mask: int, label: str) -> None:
        self.mask = mask
        self.label = label


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def parse_value(text: str) -> int:
    """Parse *text* as a base-10 unsigned integer in [1, 20000].

    Only ASCII digits are accepted: no sign, no surrounding whitespace,
    no trailing characters.

    Raises
    ------
    ValidationError
        If *text* is not all digits or the value is out of range.
    """
    if _DIGITS.fullmatch(text) is None:
        raise ValidationError(
            f"intval must be an integer in [{MIN_VALUE}, {MAX_VALUE}], got {text!r}."
        )
    value = int(text)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValidationError(
            f"intval must be in [{MIN_VALUE}, {MAX_VALUE}], got {value}."
        )
    return value


# ---------------------------------------------------------------------------
# Flipping
# ---------------------------------------------------------------------------

def flip(value: int, mask: FlipMask) -> int:
    """Return *value* XOR *mask*, truncated to 16 bits."""
    return (value ^ mask.mask) & WORD_MASK


def _requested(options: InvocationOptions) -> list[FlipMask]:
    selected = {
        FlipMask.EVEN: options.flip_even,
        FlipMask.ODD: options.flip_odd,
        FlipMask.ALL: options.flip_all,
    }
    return [mask for mask in FlipMask if selected[mask]]


def compute_results(value: int, options: InvocationOptions) -> list[FlipResult]:
    """Build every output line for *value* in emission order.

    The first entry is always the original value; one entry follows for
    each flag set in *options*.
    """
    results = [FlipResult(label="Value", value=value)]
    for mask in _requested(options):
        results.append(FlipResult(label=mask.label, value=flip(value, mask)))
    return results


def format_lines(results: list[FlipResult]) -> str:
    """Join *results* into newline-terminated output text."""
    return "".join(f"{result.render()}\n" for result in results)
