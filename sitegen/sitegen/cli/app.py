"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..building import watch as watcher
from ..building.walker import build_site
from ..reporting.console import report
from ..settings import Settings
from .parsers import parse_extension, parse_file_mode, parse_line_limit

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="sitegen",
    help="Mirror a source tree into a static site, inlining one-level templates.",
)


@app.command()
def build(
    source: Annotated[
        Optional[Path],
        typer.Option(
            "--source",
            help="Source directory (default: ./src or SITEGEN_SOURCE_DIR).",
            metavar="DIR",
        ),
    ] = None,
    dest: Annotated[
        Optional[Path],
        typer.Option(
            "--dest",
            help="Output directory (default: ./generated or SITEGEN_DEST_DIR).",
            metavar="DIR",
        ),
    ] = None,
    extension: Annotated[
        Optional[str],
        typer.Option(
            "--ext",
            help="Suffix of files that get template substitution (default: .html).",
            metavar="EXT",
        ),
    ] = None,
    max_errors: Annotated[
        Optional[int],
        typer.Option(
            "--max-errors",
            help="Most error messages kept for the summary (default: 100).",
            min=0,
        ),
    ] = None,
    max_line_length: Annotated[
        Optional[int],
        typer.Option(
            "--max-line-length",
            help="Longest markup line read in one piece; 0 removes the limit.",
        ),
    ] = None,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="Permissions of copied files in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    watch: Annotated[
        bool,
        typer.Option(
            "--watch",
            help="Rebuild whenever the source tree changes.",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Exit with status 1 when any error or warning was recorded.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Generate the site from the source tree."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting sitegen")

    settings = Settings()
    line_limit = parse_line_limit(max_line_length)
    config = settings.to_build_config(
        source_dir=source,
        dest_dir=dest,
        markup_extension=parse_extension(extension) if extension is not None else None,
        max_errors=max_errors,
        max_line_length=line_limit or None,
        file_mode=parse_file_mode(file_mode) if file_mode is not None else None,
    )
    if line_limit == 0:
        config = config.model_copy(update={"max_line_length": None})

    logger.debug(f"Config: {config.source_dir} → {config.dest_dir}")

    if watch:
        try:
            watcher.watch(
                config,
                interval=settings.watch_interval,
                debounce=settings.watch_debounce,
            )
        except KeyboardInterrupt:
            logger.info("Watch mode stopped")
        return

    errors = build_site(config)
    report(errors)

    if strict and not errors.is_empty():
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
