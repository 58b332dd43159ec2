"""Shared fixtures for hyphae tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hyphae.config import ContainerConfig
from hyphae.container import Container

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def write_files(root: Path, files: dict[str, str]) -> None:
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture()
def make_container(tmp_path):
    """Build a container rooted at tmp_path with the given files written under it."""

    def _make(files: dict[str, str] | None = None, separator: str = ".") -> Container:
        write_files(tmp_path, files or {})
        return Container(ContainerConfig(root=tmp_path, namespace_separator=separator))

    return _make
