"""Allow ``python -m bitflip`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m bitflip`` behaves identically to the ``bitflip``
console script.
"""

from __future__ import annotations

from bitflip.cli.app import cli

if __name__ == "__main__":
    cli()
