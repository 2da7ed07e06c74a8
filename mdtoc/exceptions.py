"""Exceptions raised by mdtoc."""

from pathlib import Path


class MdtocError(Exception):
    """Base exception for mdtoc operations."""


class TreeWalkError(MdtocError):
    """The directory walk failed (missing root, permissions, I/O). No partial tree is returned."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")
