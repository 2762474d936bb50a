"""Source tree walker: mirrors directories and dispatches files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import ErrorLog
from ..core.models import BuildConfig, FileEntry, FileKind
from ..rendering import engine
from ..rendering.io import copy_file, ensure_directory
from ..reporting.console import progress

logger = logging.getLogger(__name__)


def mirrored_path(path: Path, source_root: Path, dest_root: Path) -> Path:
    """Swap the source root prefix of path for the destination root."""
    return dest_root / path.relative_to(source_root)


def classify(path: Path, dest_path: Path, config: BuildConfig) -> FileEntry:
    """Build the FileEntry for one node, following symlinks."""
    if path.is_dir():
        kind = FileKind.DIRECTORY
    elif path.name.endswith(config.markup_extension):
        kind = FileKind.MARKUP
    else:
        kind = FileKind.OTHER
    return FileEntry(source_path=path, dest_path=dest_path, kind=kind)


def dispatch(entry: FileEntry, errors: ErrorLog, config: BuildConfig) -> None:
    """Render or copy a single file entry, then report it."""
    if entry.kind is FileKind.MARKUP:
        engine.render(
            entry.source_path,
            entry.dest_path,
            errors,
            max_line_length=config.max_line_length,
        )
    else:
        copy_file(
            entry.source_path,
            entry.dest_path,
            errors,
            chunk_size=config.copy_chunk_size,
            mode=config.file_mode,
        )
    progress(entry.source_path, entry.dest_path)


def walk(
    source_dir: Path, dest_dir: Path, errors: ErrorLog, config: BuildConfig
) -> None:
    """Mirror source_dir into dest_dir, depth first.

    Enumeration order is whatever the filesystem yields. An unreadable
    directory is recorded and its subtree skipped.

    Args:
        source_dir: Directory to read
        dest_dir: Mirrored output directory
        errors: Log receiving failures
        config: Build parameters
    """
    try:
        entries = list(os.scandir(source_dir))
    except OSError:
        errors.record(f"Error opening directory: {source_dir}")
        return

    ensure_directory(dest_dir, mode=config.dir_mode)

    for dir_entry in entries:
        src_path = source_dir / dir_entry.name
        entry = classify(src_path, mirrored_path(src_path, source_dir, dest_dir), config)
        if entry.kind is FileKind.DIRECTORY:
            walk(entry.source_path, entry.dest_path, errors, config)
        else:
            dispatch(entry, errors, config)


def build_site(config: BuildConfig) -> ErrorLog:
    """Run one full generation pass and return its error log."""
    errors = ErrorLog(capacity=config.max_errors)
    logger.debug(f"Building {config.source_dir} → {config.dest_dir}")
    walk(config.source_dir, config.dest_dir, errors, config)
    logger.debug(f"Build finished with {len(errors)} recorded message(s)")
    return errors
