"""Polling watch loop that regenerates the site when sources change."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Callable

import typer

from ..core.errors import ErrorLog
from ..core.models import BuildConfig
from ..reporting.console import report
from .walker import build_site

logger = logging.getLogger(__name__)

Snapshot = dict[Path, tuple[int, int]]


def snapshot(root: Path) -> Snapshot:
    """Map every path under root to its (mtime_ns, size)."""
    state: Snapshot = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = Path(dirpath) / name
            try:
                stat = path.stat()
            except OSError:
                continue
            state[path] = (stat.st_mtime_ns, stat.st_size)
    return state


def changed_paths(before: Snapshot, after: Snapshot) -> list[Path]:
    """Paths added, removed or modified between two snapshots."""
    keys = before.keys() | after.keys()
    return sorted(path for path in keys if before.get(path) != after.get(path))


def build_and_report(config: BuildConfig) -> ErrorLog:
    errors = build_site(config)
    report(errors)
    return errors


def watch(
    config: BuildConfig,
    *,
    interval: float = 0.5,
    debounce: float = 0.1,
    rebuild: Callable[[BuildConfig], object] = build_and_report,
    sleep: Callable[[float], None] = time.sleep,
    max_polls: int | None = None,
) -> int:
    """Poll the source tree and rebuild after each change.

    A change seen within `debounce` seconds of the previous build is left
    pending and picked up by a later poll. Runs until interrupted, or for
    `max_polls` polls when given.

    Returns:
        Number of rebuilds performed
    """
    typer.echo("Running in watch mode. Press Ctrl+C to stop.")
    rebuild(config)
    last_build = time.monotonic()
    previous = snapshot(config.source_dir)
    rebuilds = 0
    polls = 0

    while max_polls is None or polls < max_polls:
        sleep(interval)
        polls += 1
        current = snapshot(config.source_dir)
        changes = changed_paths(previous, current)
        if not changes:
            continue
        if time.monotonic() - last_build <= debounce:
            logger.debug(f"Deferring rebuild for {len(changes)} change(s)")
            continue

        typer.echo(f"Change detected: {', '.join(str(p) for p in changes)}")
        rebuild(config)
        rebuilds += 1
        last_build = time.monotonic()
        previous = current

    return rebuilds
