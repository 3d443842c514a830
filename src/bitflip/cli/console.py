"""Stderr console with optional Rich support.

Only diagnostics go through here.  Result lines are written verbatim to
their destination stream by :mod:`bitflip.cli.app` and never touch Rich.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any | None:
    """Create a Rich console targeting stderr, or ``None`` without Rich.

    ``soft_wrap`` keeps long messages (usage lines, file paths) on one
    line when stderr is not a terminal.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(stderr=True, highlight=False, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        """Render markup with Rich when available, else plain stderr print."""
        rich_console = get_rich_console()
        if rich_console is None:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Show ``Error: <message>`` and an optional ``Hint:`` line.

        *message* and *hint* are treated as literal text, so brackets in
        file names are not mistaken for markup.
        """
        rich_console = get_rich_console()
        if rich_console is None:
            print(f"Error: {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return

        from rich.markup import escape

        rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if hint:
            rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
