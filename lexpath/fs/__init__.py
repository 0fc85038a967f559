"""Filesystem facade for lexpath paths.

The module-level helpers delegate to a shared ``FileSystem`` created on
first use with the logging settings in effect at that time.
"""

from __future__ import annotations

import threading
from typing import Iterator, List, Optional, Tuple

from ..core.path import Path
from .facade import FileSystem, PathArg
from .protocol import FileType, FilesystemFacade
from .scan import DirectoryScan

_default_lock = threading.Lock()
_default: Optional[FileSystem] = None


def default_filesystem() -> FileSystem:
    """Return the shared FileSystem, creating it on first call."""
    global _default
    with _default_lock:
        if _default is None:
            _default = FileSystem()
        return _default


def exists(path: PathArg) -> bool:
    return default_filesystem().exists(path)


def is_file(path: PathArg) -> bool:
    return default_filesystem().is_file(path)


def is_dir(path: PathArg) -> bool:
    return default_filesystem().is_dir(path)


def is_link(path: PathArg) -> bool:
    return default_filesystem().is_link(path)


def file_type(path: PathArg) -> FileType:
    return default_filesystem().file_type(path)


def canonicalize(path: PathArg) -> Path:
    return default_filesystem().canonicalize(path)


def try_canonicalize(path: PathArg) -> Path:
    return default_filesystem().try_canonicalize(path)


def is_canonically_equal(first: PathArg, second: PathArg) -> bool:
    return default_filesystem().is_canonically_equal(first, second)


def get_file_id(path: PathArg) -> int:
    return default_filesystem().get_file_id(path)


def mkdir(path: PathArg, recursive: bool = False, mode: Optional[int] = None) -> None:
    default_filesystem().mkdir(path, recursive=recursive, mode=mode)


def scan(path: PathArg) -> DirectoryScan:
    return default_filesystem().scan(path)


def read_directory(path: PathArg) -> List[Tuple[str, Path]]:
    return default_filesystem().read_directory(path)


def scan_recursively(path: PathArg, with_symlinks: Optional[bool] = None) -> Iterator[Path]:
    return default_filesystem().scan_recursively(path, with_symlinks)


def copy(source: PathArg, destination: PathArg) -> None:
    default_filesystem().copy(source, destination)


def delete(path: PathArg) -> None:
    default_filesystem().delete(path)


def read_link(path: PathArg) -> Path:
    return default_filesystem().read_link(path)


__all__ = [
    "FileSystem",
    "FileType",
    "FilesystemFacade",
    "DirectoryScan",
    "default_filesystem",
    "exists",
    "is_file",
    "is_dir",
    "is_link",
    "file_type",
    "canonicalize",
    "try_canonicalize",
    "is_canonically_equal",
    "get_file_id",
    "mkdir",
    "scan",
    "read_directory",
    "scan_recursively",
    "copy",
    "delete",
    "read_link",
]
