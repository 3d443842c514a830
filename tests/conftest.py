"""Shared pytest fixtures and configuration for the bitflip test suite.

Guidelines
----------
* Core tests are pure — no I/O, no mocking.
* Files are only written under ``tmp_path``.
* CLI tests pass an explicit ``argv`` rather than patching ``sys.argv``.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from bitflip.cli.app import cli


@pytest.fixture
def run_cli(
    capsys: pytest.CaptureFixture[str],
) -> Callable[[list[str]], tuple[int, str, str]]:
    """Run the error boundary and return ``(exit_code, stdout, stderr)``."""

    def _run(argv: list[str]) -> tuple[int, str, str]:
        with pytest.raises(SystemExit) as exc_info:
            cli(argv)
        captured = capsys.readouterr()
        return exc_info.value.code, captured.out, captured.err

    return _run
