"""
Error types raised by bottles-core.

Every failure surfaces as a BottlesError. There are two kinds:
NotFoundError for missing runner directories and executables, and
BottlesIOError for everything the filesystem, a subprocess or the
catalog decoder can throw at us.
"""

from __future__ import annotations

from pathlib import Path


class BottlesError(Exception):
    """Base class for all bottles-core errors."""
    pass


class NotFoundError(BottlesError):
    """A directory, executable or wrapped runner is missing."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class BottlesIOError(BottlesError):
    """
    Filesystem, subprocess or decoding failure.

    The underlying exception is kept as __cause__.
    """
    pass
