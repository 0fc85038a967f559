"""Scoped directory enumeration."""

from __future__ import annotations

import logging
import os
from typing import Iterator, Optional, Tuple

from ..core.path import Path
from ..errors import PathIOError
from ..logging import StructuredLogger

logger = logging.getLogger(__name__)


class DirectoryScan:
    """Iterate the entries of one directory as ``(name, child_path)`` pairs.

    The OS handle is opened on construction and released by ``close()`` or on
    leaving a ``with`` block; running out of entries releases it early.
    ``close()`` may be called any number of times. Iterating after ``close()``
    raises ``PathIOError``.
    Entries come in the order the OS reports them and never include ``.`` or
    ``..``.
    """

    def __init__(self, path: Path, log: Optional[StructuredLogger] = None) -> None:
        raw = os.fspath(path)
        self.path = path
        self._log = log
        self._closed = False
        self._exhausted = False
        try:
            self._entries = os.scandir(raw)
        except OSError as exc:
            self._closed = True
            raise PathIOError(
                "failed to open directory", path=path.display_utf8(), errno=exc.errno
            ) from exc
        if self._log:
            self._log.debug("directory scan opened", path=path)

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[Tuple[str, Path]]:
        return self

    def __next__(self) -> Tuple[str, Path]:
        if self._closed:
            raise PathIOError("directory scan is closed", path=self.path.display_utf8())
        if self._exhausted:
            raise StopIteration
        try:
            entry = next(self._entries)
        except StopIteration:
            self._exhausted = True
            self._entries.close()
            raise
        except OSError as exc:
            raise PathIOError(
                "failed to read directory", path=self.path.display_utf8(), errno=exc.errno
            ) from exc
        return entry.name, self.path.join(entry.name)

    def close(self) -> None:
        """Release the directory handle."""
        if self._closed:
            return
        self._closed = True
        self._entries.close()
        if self._log:
            self._log.debug("directory scan closed", path=self.path)

    def __enter__(self) -> "DirectoryScan":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_closed", True):
            return
        try:
            self.close()
        except Exception:
            logger.exception("Failed to close directory scan")


__all__ = ["DirectoryScan"]
