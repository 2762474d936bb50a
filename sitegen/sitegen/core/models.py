"""Domain models for site generation configuration and walk state."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class FileKind(str, Enum):
    """Classification of a node encountered during the walk."""

    DIRECTORY = "directory"
    MARKUP = "markup"
    OTHER = "other"


class FileEntry(BaseModel):
    """A single filesystem node and its mirrored destination."""

    source_path: Path = Field(..., description="Path under the source root")
    dest_path: Path = Field(..., description="Mirrored path under the output root")
    kind: FileKind = Field(..., description="How the node is dispatched")


class TemplateDirective(BaseModel):
    """An include directive found on one line of a markup file."""

    name: str = Field(..., min_length=1, description="Referenced template filename")
    line_number: int = Field(..., ge=1, description="1-based line of the directive")

    def resolve(self, markup_path: Path) -> Path | None:
        """Return the template path next to the file that references it.

        Names that climb out of the referencing file's directory resolve to
        None.
        """
        relative = os.path.normpath(self.name)
        if os.path.isabs(relative) or relative == os.curdir:
            return None
        if relative == os.pardir or relative.startswith(os.pardir + os.sep):
            return None
        return markup_path.parent / self.name


class BuildConfig(BaseModel):
    """Configuration for a single generation run."""

    source_dir: Path = Field(default=Path("./src"), description="Source root")
    dest_dir: Path = Field(default=Path("./generated"), description="Output root")
    markup_extension: str = Field(
        default=".html", min_length=1, description="Suffix of templated files"
    )
    max_line_length: int | None = Field(
        default=4095, ge=1, description="Longest line read in one piece (None = unbounded)"
    )
    copy_chunk_size: int = Field(default=4096, ge=1, description="Copy buffer size")
    file_mode: int = Field(default=0o644, description="Copied file permissions (octal)")
    dir_mode: int = Field(default=0o755, description="Created directory permissions (octal)")
    max_errors: int = Field(default=100, ge=0, description="Error log capacity")

    @field_validator("markup_extension")
    @classmethod
    def _no_separator(cls, value: str) -> str:
        if "/" in value:
            raise ValueError(f"Extension must not contain a path separator: {value!r}")
        return value
