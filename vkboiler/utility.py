"""Small console output and C-style string formatting helpers."""

import sys

__all__ = ["emit", "printf", "cformat"]


def emit(message):
    """Write ``message`` to standard output as-is, without a trailing newline."""
    sys.stdout.write(message)


def cformat(fmt, *args):
    """Return ``fmt`` formatted printf-style with ``args``."""
    return fmt % args


def printf(fmt, *args):
    """Format printf-style and write the result to standard output."""
    emit(cformat(fmt, *args))