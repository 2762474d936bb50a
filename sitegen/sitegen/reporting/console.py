"""Console progress lines and the end-of-run summary."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.errors import ErrorLog


def progress(src_path: Path, dest_path: Path) -> None:
    typer.echo(f"Processed: {src_path} -> {dest_path}")


def report(errors: ErrorLog) -> None:
    """Print the success banner, or every recorded message between failure banners."""
    if errors.is_empty():
        typer.secho("Static site generation complete.", fg=typer.colors.GREEN)
        return

    typer.secho("Static site generation completed with errors:", fg=typer.colors.RED)
    for message in errors:
        typer.echo(f"- {message}")
    typer.secho("Generation failed due to errors.", fg=typer.colors.RED)
    typer.secho("Fix the errors and run again. :)", fg=typer.colors.YELLOW)
