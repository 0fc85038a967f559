"""Filesystem collaborator interfaces."""

from __future__ import annotations

from enum import Enum
from typing import List, Protocol, Tuple, runtime_checkable

from ..core.path import Path


class FileType(Enum):
    """What a path names on disk, without following a final symlink."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"  # sockets, fifos, devices
    MISSING = "missing"


@runtime_checkable
class FilesystemFacade(Protocol):
    """The filesystem operations lexical paths are checked against."""

    def read_directory(self, path: Path) -> List[Tuple[str, Path]]:
        """List ``(name, child_path)`` pairs of a directory, without ``.`` and ``..``."""
        ...

    def real_path(self, path: Path) -> str:
        """Resolve symlinks and ``..`` against the real filesystem."""
        ...

    def file_type(self, path: Path) -> FileType:
        """Classify ``path`` without following a final symlink."""
        ...


__all__ = ["FileType", "FilesystemFacade"]
