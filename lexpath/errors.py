"""Exception taxonomy for lexpath.

Parsing and argument errors are ``ValueError`` subclasses, filesystem
failures are ``OSError`` subclasses, and platform mismatches are kept apart
from both so that callers never confuse "wrong platform" with "I/O failed".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .core.platform import Platform


class LexPathError(Exception):
    """Base class for every error raised by lexpath."""


class InvalidPathError(LexPathError, ValueError):
    """Raised when a path string is malformed for its platform."""


class InvalidArgumentError(LexPathError, ValueError):
    """Raised when an operation receives an argument it cannot work with."""


class PathIOError(LexPathError, OSError):
    """Raised when a filesystem operation fails.

    The originating ``OSError``, when there is one, is chained as ``__cause__``.
    """

    def __init__(
        self, message: str, *, path: Optional[str] = None, errno: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.errno = errno

    def __str__(self) -> str:
        if self.path is None:
            return self.args[0]
        return f"{self.args[0]}: {self.path}"


class PlatformMismatchError(LexPathError, RuntimeError):
    """Raised when a path built for one platform touches another platform's filesystem.

    Use ``Path.to_current_platform()`` to *attempt* an explicit conversion.
    """

    def __init__(self, current: "Platform", other: "Platform") -> None:
        super().__init__(f"attempt to use a {other} path to interact with a {current} system")
        self.current = current
        self.other = other


__all__ = [
    "LexPathError",
    "InvalidPathError",
    "InvalidArgumentError",
    "PathIOError",
    "PlatformMismatchError",
]
