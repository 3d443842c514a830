"""Infrastructure: resolve where result lines are written.

Standard output is borrowed, never closed.  A ``-o`` file is created or
truncated and always closed when the ``with`` block exits.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from bitflip.exceptions import OutputOpenError, OutputWriteError


def _describe(path: Path | None) -> str:
    return "standard output" if path is None else f"output file '{path}'"


@contextmanager
def open_destination(path: Path | None) -> Iterator[TextIO]:
    """Yield a writable text stream for *path*, or stdout when ``None``.

    The stream is flushed before the block is left, so a full disk or a
    closed pipe is reported here rather than at interpreter exit.

    Raises
    ------
    OutputOpenError
        If the file cannot be opened for writing (missing parent
        directory, permission denied, path is a directory, ...).
    OutputWriteError
        If writing, flushing, or closing the stream fails.
    """
    if path is None:
        try:
            yield sys.stdout
            sys.stdout.flush()
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write to {_describe(path)}: {exc.strerror or exc}",
            ) from exc
        return

    try:
        stream = open(path, "w", encoding="utf-8")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise OutputOpenError(
            f"Cannot open {_describe(path)}: {reason}",
            hint="Check that the directory exists and is writable.",
        ) from exc

    try:
        with stream:
            yield stream
            stream.flush()
    except OSError as exc:
        raise OutputWriteError(
            f"Cannot write to {_describe(path)}: {exc.strerror or exc}",
            hint="Check free disk space and that the file is writable.",
        ) from exc
