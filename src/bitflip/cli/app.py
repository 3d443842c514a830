"""CLI application entry point for bitflip.

This module is the **sole error boundary** for the application.  It
catches :class:`~bitflip.exceptions.BitflipError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, renders a message on stderr, and
returns a well-defined exit code.

Flow
----
parse flags → validate ``intval`` → open destination → emit lines → close.
Nothing is written to the destination until every check has passed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from bitflip.cli import exit_codes
from bitflip.cli.console import console
from bitflip.core.bit_ops import (
    MAX_VALUE,
    MIN_VALUE,
    compute_results,
    format_lines,
    parse_value,
)
from bitflip.core.models import InvocationOptions
from bitflip.exceptions import BitflipError, UsageError
from bitflip.infra.output import open_destination
from bitflip.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=self.format_usage().strip())


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``intval`` is kept as a string here; range and digit checks belong to
    :func:`~bitflip.core.bit_ops.parse_value`.
    """
    parser = _ArgumentParser(
        prog="bitflip",
        description="Flip even, odd, or all bits of a 16-bit integer.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-e",
        dest="flip_even",
        action="store_true",
        help="flip even bits (bit positions 0, 2, 4, ...)",
    )
    parser.add_argument(
        "-f",
        dest="flip_odd",
        action="store_true",
        help="flip odd bits (bit positions 1, 3, 5, ...)",
    )
    parser.add_argument(
        "-a",
        dest="flip_all",
        action="store_true",
        help="flip all bits",
    )
    parser.add_argument(
        "-o",
        dest="output",
        metavar="outputfile",
        type=Path,
        default=None,
        help="write output to file instead of screen",
    )
    parser.add_argument(
        "intval",
        help=f"integer between {MIN_VALUE} and {MAX_VALUE} inclusive",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> InvocationOptions:
    return InvocationOptions(
        flip_even=args.flip_even,
        flip_odd=args.flip_odd,
        flip_all=args.flip_all,
        output=args.output,
    )


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _handle_flip(value: int, options: InvocationOptions) -> int:
    """Compute every requested line and write it to the destination."""
    text = format_lines(compute_results(value, options))
    with open_destination(options.output) as stream:
        stream.write(text)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the bitflip CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    BitflipError
        On a usage, validation, or output-file error.  :func:`cli`
        turns these into exit code 1.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    options = _options_from_args(args)
    value = parse_value(args.intval)

    return _handle_flip(value, options)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except BitflipError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue."
        )
        console.error(f"{type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
