"""Tests for the pure flip logic (core/bit_ops.py).

No I/O, no mocking.  Covers:

* Input validation (digits only, range [1, 20000])
* Mask values and XOR results
* Non-chaining of combined flips and fixed emission order
"""

from __future__ import annotations

import pytest

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
from bitflip.exceptions import ValidationError


# ---------------------------------------------------------------------------
# parse_value
# ---------------------------------------------------------------------------

class TestParseValue:
    @pytest.mark.parametrize("text, expected", [("1", 1), ("5", 5), ("20000", 20000), ("007", 7)])
    def test_accepts_in_range(self, text: str, expected: int) -> None:
        assert parse_value(text) == expected

    @pytest.mark.parametrize("text", ["0", "20001", "65536", "99999999999999999999"])
    def test_rejects_out_of_range(self, text: str) -> None:
        with pytest.raises(ValidationError, match=r"\[1, 20000\]"):
            parse_value(text)

    @pytest.mark.parametrize("text", ["", "abc", "12abc", "1.5", "-5", "+5", " 5", "5 ", "0x10"])
    def test_rejects_non_digits(self, text: str) -> None:
        with pytest.raises(ValidationError, match=r"\[1, 20000\]"):
            parse_value(text)

    def test_bounds(self) -> None:
        assert (MIN_VALUE, MAX_VALUE) == (1, 20000)


# ---------------------------------------------------------------------------
# FlipMask / flip
# ---------------------------------------------------------------------------

class TestFlipMask:
    def test_mask_values(self) -> None:
        assert FlipMask.EVEN.mask == 0x5555
        assert FlipMask.ODD.mask == 0xAAAA
        assert FlipMask.ALL.mask == 0xFFFF

    def test_even_and_odd_partition_all(self) -> None:
        assert FlipMask.EVEN.mask | FlipMask.ODD.mask == FlipMask.ALL.mask
        assert FlipMask.EVEN.mask & FlipMask.ODD.mask == 0

    def test_declaration_order(self) -> None:
        assert list(FlipMask) == [FlipMask.EVEN, FlipMask.ODD, FlipMask.ALL]


class TestFlip:
    def test_even_example(self) -> None:
        assert flip(5, FlipMask.EVEN) == 21840

    def test_odd_example(self) -> None:
        assert flip(20000, FlipMask.ODD) == 58506

    def test_all_example(self) -> None:
        assert flip(20000, FlipMask.ALL) == 45535

    @pytest.mark.parametrize("mask", list(FlipMask))
    @pytest.mark.parametrize("value", [MIN_VALUE, 2, 255, 4096, 12345, MAX_VALUE])
    def test_matches_xor_and_fits_16_bits(self, value: int, mask: FlipMask) -> None:
        result = flip(value, mask)
        assert result == value ^ mask.mask
        assert 0 <= result <= 0xFFFF

    @pytest.mark.parametrize("mask", list(FlipMask))
    def test_involutive(self, mask: FlipMask) -> None:
        for value in range(MIN_VALUE, MAX_VALUE + 1, 997):
            assert flip(flip(value, mask), mask) == value


# ---------------------------------------------------------------------------
# compute_results / format_lines
# ---------------------------------------------------------------------------

class TestComputeResults:
    def test_no_flags_only_value(self) -> None:
        assert compute_results(5, InvocationOptions()) == [FlipResult("Value", 5)]

    def test_even_only(self) -> None:
        results = compute_results(5, InvocationOptions(flip_even=True))
        assert results == [
            FlipResult("Value", 5),
            FlipResult("Even bits flipped", 21840),
        ]

    def test_combined_flips_are_not_chained(self) -> None:
        value = 100
        combined = compute_results(value, InvocationOptions(flip_even=True, flip_odd=True))
        even_only = compute_results(value, InvocationOptions(flip_even=True))
        odd_only = compute_results(value, InvocationOptions(flip_odd=True))

        assert combined[1] == even_only[1]
        assert combined[2] == odd_only[1]
        assert combined[2].value == value ^ 0xAAAA
        assert combined[2].value != (value ^ 0x5555) ^ 0xAAAA

    def test_all_flags_fixed_order(self) -> None:
        results = compute_results(
            20000, InvocationOptions(flip_all=True, flip_odd=True, flip_even=True)
        )
        assert [r.label for r in results] == [
            "Value",
            "Even bits flipped",
            "Odd bits flipped",
            "All bits flipped",
        ]

    def test_odd_and_all_skip_even(self) -> None:
        results = compute_results(20000, InvocationOptions(flip_odd=True, flip_all=True))
        assert results == [
            FlipResult("Value", 20000),
            FlipResult("Odd bits flipped", 58506),
            FlipResult("All bits flipped", 45535),
        ]


class TestFormatLines:
    def test_newline_terminated(self) -> None:
        text = format_lines([FlipResult("Value", 5), FlipResult("Even bits flipped", 21840)])
        assert text == "Value: 5\nEven bits flipped: 21840\n"

    def test_empty(self) -> None:
        assert format_lines([]) == ""
