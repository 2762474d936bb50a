"""Sitegen - static site generator with one-level template inclusion.

Mirrors a source tree into an output tree, copying files verbatim and
inlining sibling templates into markup files.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
