"""File I/O operations for site generation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Iterator

from ..core.errors import ErrorLog

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def ensure_directory(path: Path, mode: int = 0o755) -> None:
    """Create a directory if it is missing.

    Failures are logged and otherwise ignored; later writes into the
    directory report their own errors.

    Args:
        path: Directory to create
        mode: Permissions for a newly created directory
    """
    try:
        path.mkdir(mode=mode)
    except FileExistsError:
        pass
    except OSError as exc:
        logger.debug(f"Could not create directory {path}: {exc}")


def open_text(path: Path, mode: str = "r") -> IO[str]:
    """Open a text file whose lines end only at line feeds, preserving undecodable bytes."""
    return open(path, mode, encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="\n")


def iter_lines(handle: IO[str], max_length: int | None = None) -> Iterator[str]:
    """Yield newline-terminated lines, splitting any longer than max_length.

    Args:
        handle: Open text handle
        max_length: Most characters returned per piece (None = whole lines)

    Yields:
        Lines or line pieces, in order, with their newline where present
    """
    limit = -1 if max_length is None else max_length
    while True:
        line = handle.readline(limit)
        if not line:
            return
        yield line


def copy_file(
    src_path: Path,
    dest_path: Path,
    errors: ErrorLog,
    *,
    chunk_size: int = 4096,
    mode: int = 0o644,
) -> bool:
    """Copy a file byte for byte in fixed-size chunks.

    A short write stops the transfer and leaves the partial destination.

    Args:
        src_path: File to read
        dest_path: File to create or truncate
        errors: Log receiving failure messages
        chunk_size: Bytes per read
        mode: Permissions for a newly created destination

    Returns:
        True when every byte was transferred
    """
    try:
        src = open(src_path, "rb")
    except OSError:
        errors.record(f"Error opening source file: {src_path}")
        return False

    with src:
        try:
            fd = os.open(dest_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        except OSError:
            errors.record(f"Error opening destination file: {dest_path}")
            return False

        with os.fdopen(fd, "wb", buffering=0) as dest:
            while True:
                try:
                    chunk = src.read(chunk_size)
                except OSError as exc:
                    errors.record(f"Error copying {src_path} to {dest_path}: {exc}")
                    return False
                if not chunk:
                    break
                try:
                    written = dest.write(chunk)
                except OSError:
                    written = None
                if written != len(chunk):
                    errors.record(f"Error writing to file: {dest_path}")
                    return False

    logger.debug(f"Copied {src_path} → {dest_path}")
    return True
