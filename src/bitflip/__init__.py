"""bitflip — flip even, odd, or all bits of a bounded 16-bit integer.

A small command-line tool with the same layered layout as a larger
application: pure ``core``, file-handling ``infra``, and a ``cli`` error
boundary.
"""

from bitflip.version import __version__

__all__: list[str] = ["__version__"]
