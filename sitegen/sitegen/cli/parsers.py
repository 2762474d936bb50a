"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_extension(value: str) -> str:
    """Normalize a markup extension to a leading-dot suffix."""
    value = value.strip()
    if not value or value == ".":
        raise typer.BadParameter("Extension must not be empty")
    if "/" in value:
        raise typer.BadParameter(f"Extension must not contain '/': {value!r}")
    return value if value.startswith(".") else f".{value}"


def parse_line_limit(value: int | None) -> int | None:
    """Map a line limit option to the configured value; 0 lifts the limit."""
    if value is None:
        return None
    if value < 0:
        raise typer.BadParameter(f"Line limit must be >= 0, got {value}")
    return value
