from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import BuildConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SITEGEN_", case_sensitive=False)

    source_dir: Path = Path("./src")
    dest_dir: Path = Path("./generated")
    markup_extension: str = ".html"
    max_line_length: int | None = 4095
    copy_chunk_size: int = 4096
    file_mode: int = 0o644
    dir_mode: int = 0o755
    max_errors: int = 100
    watch_interval: float = 0.5
    watch_debounce: float = 0.1

    def to_build_config(self, **overrides: object) -> BuildConfig:
        """Validated build parameters, with explicit overrides winning."""
        values = self.model_dump(exclude={"watch_interval", "watch_debounce"})
        values.update({k: v for k, v in overrides.items() if v is not None})
        return BuildConfig(**values)
