"""Infrastructure layer — interaction with the filesystem and streams.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no Rich rendering).
* Raw ``OSError`` is caught here and re-raised as a
  :class:`~bitflip.exceptions.BitflipError` subclass.
"""

from bitflip.infra.output import open_destination

__all__: list[str] = ["open_destination"]
