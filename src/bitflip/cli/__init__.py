"""CLI layer — argument parsing, terminal output, and error boundary.

This package is the outermost layer.  It may import from ``core`` and
``infra``; neither of those may import from ``cli``.
"""
