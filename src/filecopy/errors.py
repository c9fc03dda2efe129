"""Error types raised by the copy pipeline.

Each stage raises its own subclass of ``CopyError`` with the underlying
exception chained as ``__cause__``.
"""

from __future__ import annotations


class CopyError(Exception):
    """Base exception for file copy failures."""


class UsageError(CopyError):
    """Wrong number of command-line arguments."""


class PathResolutionError(CopyError):
    """An absolute path could not be computed for an argument."""


class IdentityError(CopyError):
    """Source and destination resolve to the same path."""


class SourceOpenError(CopyError):
    """The source could not be opened for reading."""


class DestinationCreateError(CopyError):
    """The destination could not be created or truncated for writing."""


class CopyStreamError(CopyError):
    """Reading or writing failed while bytes were being transferred."""
