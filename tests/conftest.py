from pathlib import Path

import pytest

from sitegen.core.errors import ErrorLog
from sitegen.core.models import BuildConfig


def write_tree(root: Path, files: dict) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))


@pytest.fixture
def errors():
    return ErrorLog()


@pytest.fixture
def site(tmp_path):
    source = tmp_path / "src"
    dest = tmp_path / "generated"
    source.mkdir()
    return BuildConfig(source_dir=source, dest_dir=dest)


@pytest.fixture
def make_tree():
    return write_tree
