"""Template substitution engine for markup files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO

from ..core.errors import ErrorLog
from ..core.models import TemplateDirective
from .io import iter_lines, open_text

logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r"<!-- template: ([^-]+) -->")


def find_directive(line: str, line_number: int) -> TemplateDirective | None:
    """Return the first include directive on a line, if any.

    Args:
        line: Raw line text
        line_number: 1-based position of the line in its file

    Returns:
        Parsed directive, or None when the line has none
    """
    match = DIRECTIVE_PATTERN.search(line)
    if match is None:
        return None
    return TemplateDirective(name=match.group(1), line_number=line_number)


def include_template(template_path: Path, output: IO[str]) -> bool:
    """Copy a template's lines into output unchanged.

    Returns:
        False when the template could not be opened
    """
    try:
        template = open_text(template_path)
    except (OSError, ValueError):
        return False

    with template:
        for template_line in iter_lines(template):
            output.write(template_line)
    return True


def render(
    input_path: Path,
    output_path: Path,
    errors: ErrorLog,
    *,
    max_line_length: int | None = 4095,
) -> bool:
    """Render a markup file, inlining sibling templates one level deep.

    Args:
        input_path: Markup file to read
        output_path: File to write
        errors: Log receiving failures and missing-template warnings
        max_line_length: Longest piece read as one line (None = unbounded)

    Returns:
        True when the whole input was processed
    """
    try:
        source = open_text(input_path)
    except OSError:
        errors.record(f"Error opening input file: {input_path}")
        return False

    with source:
        try:
            output = open_text(output_path, "w")
        except OSError:
            errors.record(f"Error opening output file: {output_path}")
            return False

        with output:
            try:
                _substitute(input_path, source, output, errors, max_line_length)
            except OSError as exc:
                errors.record(f"Error processing {input_path}: {exc}")
                return False

    logger.debug(f"Rendered {input_path} → {output_path}")
    return True


def _substitute(
    input_path: Path,
    source: IO[str],
    output: IO[str],
    errors: ErrorLog,
    max_line_length: int | None,
) -> None:
    for line_number, line in enumerate(iter_lines(source, max_line_length), start=1):
        directive = find_directive(line, line_number)
        if directive is None:
            output.write(line)
            continue

        template_path = directive.resolve(input_path)
        if template_path is not None and include_template(template_path, output):
            continue

        errors.record(
            f"Warning: Template {directive.name} not found for "
            f"{input_path}:{directive.line_number}"
        )
        output.write(line)
