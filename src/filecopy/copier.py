"""Path resolution, identity guard and stream copy for a single file."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass

from .config import CopyConfig
from .errors import (
    CopyStreamError,
    DestinationCreateError,
    IdentityError,
    PathResolutionError,
    SourceOpenError,
)

logger = logging.getLogger(__name__)


@dataclass
class CopyResult:
    """Outcome of a successful copy."""
    source: str
    destination: str
    bytes_copied: int


def resolve_path(path: str, role: str = "source") -> str:
    """Return the absolute, lexically normalized form of ``path``.

    The result is only used to compare source and destination. Symlinks are
    not resolved and the filesystem is not consulted beyond the working
    directory lookup.

    Args:
        path: Absolute or relative path as given on the command line.
        role: "source" or "destination", used in the error message.

    Raises:
        PathResolutionError: If the working directory cannot be determined
            or the path is malformed.
    """
    if "\x00" in path:
        raise PathResolutionError(
            f"getting absolute path of {role} file: embedded null byte"
        )

    try:
        resolved = os.path.abspath(path)
    except OSError as exc:
        raise PathResolutionError(
            f"getting absolute path of {role} file: {exc}"
        ) from exc

    # normpath keeps a leading "//" on POSIX; "//a" and "/a" must compare equal
    if os.name == "posix" and resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return resolved


def check_distinct(
    source_abs: str, destination_abs: str, identity_check: str = "path"
) -> None:
    """Reject a copy whose source and destination are the same file.

    With ``identity_check="path"`` only the resolved path strings are
    compared, so hard links and symlink aliases pass. ``"inode"`` also
    compares device and inode when both paths exist.

    Raises:
        IdentityError: If source and destination are the same.
        PathResolutionError: If the inode comparison cannot stat a path.
    """
    if source_abs == destination_abs:
        raise IdentityError("source and destination files are the same")

    if identity_check == "inode":
        if os.path.exists(source_abs) and os.path.exists(destination_abs):
            try:
                same = os.path.samefile(source_abs, destination_abs)
            except OSError as exc:
                raise PathResolutionError(
                    f"comparing source and destination files: {exc}"
                ) from exc
            if same:
                raise IdentityError("source and destination files are the same")


def copy_file(
    source: str, destination: str, buffer_size: int = 64 * 1024
) -> int:
    """Stream all bytes from ``source`` into ``destination``.

    The destination is created, or truncated if it exists. On a failure
    during the transfer it is left partially written.

    Returns:
        Number of bytes written to the destination.

    Raises:
        SourceOpenError: The source cannot be opened; destination untouched.
        DestinationCreateError: The destination cannot be opened for writing.
        CopyStreamError: A read or write failed mid-transfer.
    """
    try:
        src = open(source, "rb")
    except OSError as exc:
        raise SourceOpenError(f"opening source file: {exc}") from exc

    with src:
        try:
            dst = open(destination, "wb")
        except OSError as exc:
            raise DestinationCreateError(
                f"creating destination file: {exc}"
            ) from exc

        with dst:
            try:
                shutil.copyfileobj(src, dst, buffer_size)
                dst.flush()
            except OSError as exc:
                raise CopyStreamError(f"copying file: {exc}") from exc
            return dst.tell()


def copy(
    source: str, destination: str, config: CopyConfig | None = None
) -> CopyResult:
    """Resolve, guard and copy ``source`` to ``destination``.

    The original path strings are used for opening files; the resolved
    forms only feed the identity check.
    """
    if config is None:
        config = CopyConfig()

    source_abs = resolve_path(source, "source")
    destination_abs = resolve_path(destination, "destination")
    logger.debug("Resolved source: %s", source_abs)
    logger.debug("Resolved destination: %s", destination_abs)

    check_distinct(source_abs, destination_abs, config.identity_check)

    logger.debug("Copying with %d byte buffer", config.buffer_size)
    bytes_copied = copy_file(source, destination, config.buffer_size)
    logger.debug("Wrote %d bytes to %s", bytes_copied, destination)

    return CopyResult(
        source=source, destination=destination, bytes_copied=bytes_copied
    )
