"""Test setup for mdtoc."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point MDTOC_CONFIG at a per-test file so a real .mdtoc.json never leaks in."""
    path = tmp_path / "config" / ".mdtoc.json"
    monkeypatch.setenv("MDTOC_CONFIG", str(path))
    return path


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper that writes {relative path: content} under tmp_path/<name>."""

    def _make(files: dict[str, str], name: str = "proj") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make
