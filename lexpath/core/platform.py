"""Platform descriptors: separators and component-name rules."""

from __future__ import annotations

import os
from enum import Enum

from .. import config
from ..errors import InvalidPathError, PlatformMismatchError

_WINDOWS_FORBIDDEN = '<>:"/\\|?*'


class Platform(Enum):
    """A family of filesystems that interprets paths the same way.

    Members are process-wide singletons; compare them with ``is``.
    """

    UNIX = "unix"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return "Windows" if self is Platform.WINDOWS else "Unix"

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS

    @property
    def directory_separator(self) -> str:
        """Separator used when reconstructing a path string."""
        return "\\" if self is Platform.WINDOWS else "/"

    def is_separator(self, char: str, verbatim: bool = False) -> bool:
        """Return True if ``char`` is a directory separator in the given mode.

        Unix has no verbatim mode; asking for one is a programming error.
        """
        if self is Platform.UNIX:
            assert not verbatim, "Unix paths have no verbatim mode"
            return char == "/"
        if verbatim:
            return char == "\\"
        return char == "/" or char == "\\"

    def validate_component_name(self, name: str, verbatim: bool = False) -> None:
        """Validate a normal path component.

        Raises:
            InvalidPathError: If ``name`` contains characters this platform forbids.
        """
        if self is Platform.UNIX:
            if "/" in name:
                raise InvalidPathError("forward slashes not allowed in Unix path components")
            if "\0" in name:
                raise InvalidPathError("NUL bytes not allowed in Unix path components")
            return

        for char in name:
            if ord(char) < 32:
                raise InvalidPathError(
                    "non-printable ASCII characters not allowed in Windows path components"
                )
            if char in _WINDOWS_FORBIDDEN:
                raise InvalidPathError(
                    f"the {char} character is not allowed in Windows path components"
                )
        if not verbatim and name.endswith("."):
            raise InvalidPathError("Windows path components must not end with a dot")

    def check(self) -> None:
        """Raise unless this platform is the one actually running.

        Raises:
            PlatformMismatchError: If this is not the running platform.
        """
        current = Platform.current()
        if self is not current:
            raise PlatformMismatchError(current, self)

    @classmethod
    def current(cls) -> "Platform":
        """Return the platform of the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.UNIX

    @classmethod
    def default(cls) -> "Platform":
        """Return the platform used for paths built without an explicit one.

        Honors ``LEXPATH_DEFAULT_PLATFORM``; ``auto`` means the running platform.
        """
        choice = config.settings.default_platform
        if choice == "unix":
            return cls.UNIX
        if choice == "windows":
            return cls.WINDOWS
        return cls.current()


__all__ = ["Platform"]
