"""Filesystem operations on lexpath paths.

Every method rejects a path whose platform is not the running platform with
``PlatformMismatchError`` before touching the disk, and reports OS failures as
``PathIOError`` chained to the original ``OSError``.
"""

from __future__ import annotations

import errno
import os
import shutil
import stat
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple, Union

from .. import config
from ..core.path import Path
from ..core.platform import Platform
from ..errors import InvalidArgumentError, PathIOError
from ..logging import StructuredLogger, create_logger
from .protocol import FileType
from .scan import DirectoryScan

PathArg = Union[Path, str, "os.PathLike[str]"]


@contextmanager
def _translate_os_error(action: str, path: Path) -> Iterator[None]:
    try:
        yield
    except PathIOError:
        raise
    except OSError as exc:
        raise PathIOError(f"failed to {action}", path=path.display_utf8(), errno=exc.errno) from exc


class FileSystem:
    """Filesystem facade for paths of the running platform.

    Plain strings are accepted wherever a path is and are interpreted on the
    running platform.
    """

    def __init__(self, log: Optional[StructuredLogger] = None) -> None:
        self.log = log if log is not None else create_logger("fs")

    @staticmethod
    def _path(path: PathArg) -> Path:
        if isinstance(path, Path):
            return path
        if isinstance(path, (str, os.PathLike)):
            return Path(os.fspath(path), Platform.current())
        raise InvalidArgumentError("path must be a str, os.PathLike or Path")

    def _os_path(self, path: PathArg) -> Tuple[Path, str]:
        path = self._path(path)
        return path, os.fspath(path)

    # ---------- Queries ----------
    def exists(self, path: PathArg) -> bool:
        """True if ``path`` exists, following symlinks."""
        _, raw = self._os_path(path)
        return os.path.exists(raw)

    def is_file(self, path: PathArg) -> bool:
        _, raw = self._os_path(path)
        return os.path.isfile(raw)

    def is_dir(self, path: PathArg) -> bool:
        _, raw = self._os_path(path)
        return os.path.isdir(raw)

    def is_link(self, path: PathArg) -> bool:
        _, raw = self._os_path(path)
        return os.path.islink(raw)

    def file_type(self, path: PathArg) -> FileType:
        """Classify ``path`` with ``lstat``; a missing path is ``MISSING``."""
        path, raw = self._os_path(path)
        try:
            mode = os.lstat(raw).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return FileType.MISSING
        except OSError as exc:
            raise PathIOError("failed to stat", path=path.display_utf8(), errno=exc.errno) from exc
        if stat.S_ISLNK(mode):
            return FileType.SYMLINK
        if stat.S_ISDIR(mode):
            return FileType.DIRECTORY
        if stat.S_ISREG(mode):
            return FileType.FILE
        return FileType.OTHER

    def get_file_id(self, path: PathArg) -> int:
        """Inode (file index on Windows) of the file ``path`` points to."""
        path, raw = self._os_path(path)
        with _translate_os_error("stat", path):
            return os.stat(raw).st_ino

    # ---------- Canonicalization ----------
    def canonicalize(self, path: PathArg) -> Path:
        """Absolute path with every symlink, ``.`` and ``..`` resolved.

        Raises:
            PathIOError: If any part of the path does not exist.
        """
        path, raw = self._os_path(path)
        try:
            resolved = os.path.realpath(raw, strict=True)
        except OSError as exc:
            self.log.warning("canonicalize failed", path=path, errno=exc.errno)
            raise PathIOError(
                "failed to canonicalize", path=path.display_utf8(), errno=exc.errno
            ) from exc
        return Path(resolved, path.platform)

    def real_path(self, path: PathArg) -> str:
        return self.canonicalize(path).to_string()

    def try_canonicalize(self, path: PathArg) -> Path:
        """``canonicalize``, or ``path`` unchanged if that fails."""
        path = self._path(path)
        try:
            return self.canonicalize(path)
        except PathIOError:
            return path

    def is_canonically_equal(self, first: PathArg, second: PathArg) -> bool:
        """True if both paths exist and canonicalize to the same path."""
        try:
            return self.canonicalize(first) == self.canonicalize(second)
        except PathIOError:
            return False

    # ---------- Directories ----------
    def mkdir(self, path: PathArg, recursive: bool = False, mode: Optional[int] = None) -> None:
        """Create a directory; an existing directory is not an error.

        Args:
            path: Directory to create
            recursive: Also create missing parents
            mode: Permission bits before umask (default: ``LEXPATH_MKDIR_MODE``)
        """
        path, raw = self._os_path(path)
        if mode is None:
            mode = config.settings.mkdir_mode
        with _translate_os_error("create directory", path):
            if recursive:
                os.makedirs(raw, mode, exist_ok=True)
            else:
                try:
                    os.mkdir(raw, mode)
                except FileExistsError:
                    if not os.path.isdir(raw):
                        raise
                    return
        self.log.info("directory created", path=path, recursive=recursive)

    def scan(self, path: PathArg) -> DirectoryScan:
        """Open ``path`` for enumeration; use the result as a context manager."""
        path = self._path(path)
        path.platform.check()
        return DirectoryScan(path, self.log)

    def read_directory(self, path: PathArg) -> List[Tuple[str, Path]]:
        """All ``(name, child_path)`` entries of a directory, sorted by name."""
        with self.scan(path) as entries:
            return sorted(entries, key=lambda entry: entry[0])

    def scan_recursively(
        self, path: PathArg, with_symlinks: Optional[bool] = None
    ) -> Iterator[Path]:
        """Yield every path below ``path``, each directory before its contents.

        Symlinks are never descended into; they are yielded only when
        ``with_symlinks`` is set (default: ``LEXPATH_SCAN_WITH_SYMLINKS``).
        """
        if with_symlinks is None:
            with_symlinks = config.settings.scan_with_symlinks
        for _, child in self.read_directory(path):
            kind = self.file_type(child)
            if kind is FileType.MISSING:
                # removed since the listing
                continue
            if kind is FileType.SYMLINK:
                if with_symlinks:
                    yield child
                continue
            yield child
            if kind is FileType.DIRECTORY:
                yield from self.scan_recursively(child, with_symlinks)

    # ---------- Copy / delete ----------
    def read_link(self, path: PathArg) -> Path:
        """Target of the symlink ``path``, as stored in the link."""
        path, raw = self._os_path(path)
        with _translate_os_error("read link", path):
            return Path(os.readlink(raw), path.platform)

    def copy(self, source: PathArg, destination: PathArg) -> None:
        """Copy a file, symlink or directory tree.

        Symlinks are recreated with the same target, never followed.

        Raises:
            PathIOError: If ``source`` is missing or a special file, or any
                step of the copy fails.
        """
        source = self._path(source)
        destination = self._path(destination)
        destination.platform.check()
        kind = self.file_type(source)
        src_raw, dest_raw = os.fspath(source), os.fspath(destination)

        if kind is FileType.MISSING:
            raise PathIOError(
                "no such file or directory", path=source.display_utf8(), errno=errno.ENOENT
            )
        if kind is FileType.OTHER:
            raise PathIOError("cannot copy special file", path=source.display_utf8())

        with _translate_os_error("copy", source):
            if kind is FileType.SYMLINK:
                os.symlink(os.readlink(src_raw), dest_raw)
            elif kind is FileType.FILE:
                shutil.copy2(src_raw, dest_raw)
            else:
                self.mkdir(destination, mode=stat.S_IMODE(os.stat(src_raw).st_mode))
                for name, child in self.read_directory(source):
                    self.copy(child, destination.join(name))
        self.log.info("copied", source=source, destination=destination, type=kind.value)

    def delete(self, path: PathArg) -> None:
        """Delete a file, symlink or directory tree. Symlinks are never followed."""
        path, raw = self._os_path(path)
        kind = self.file_type(path)
        with _translate_os_error("delete", path):
            if kind is FileType.DIRECTORY:
                for _, child in self.read_directory(path):
                    self.delete(child)
                os.rmdir(raw)
            elif kind is FileType.SYMLINK and os.name == "nt" and os.path.isdir(raw):
                # directory junctions and links on Windows
                os.rmdir(raw)
            else:
                os.unlink(raw)
        self.log.info("deleted", path=path, type=kind.value)


__all__ = ["FileSystem"]
