"""Prefix variants: the platform-specific leading segment of a path.

Every variant is an immutable value. ``is_verbatim`` is a property of the
variant and decides how the rest of the string is tokenized; ``implies_root``
marks prefixes that always carry a root even without a trailing separator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union


class _PrefixBase:
    __slots__ = ()

    is_verbatim: ClassVar[bool] = False
    implies_root: ClassVar[bool] = False

    def to_string(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class UnixRoot(_PrefixBase):
    """The leading ``/`` of a Unix absolute path.

    Its text is empty: the separator itself is the ``RootDir`` component.
    """

    def to_string(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class DiskPrefix(_PrefixBase):
    """A drive letter, e.g. ``C:``.

    ``letter`` keeps the case as written; equality uses the upper-cased ``drive``.
    """

    letter: str = field(compare=False)
    drive: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "drive", self.letter.upper())

    def get_disk(self) -> str:
        return self.drive

    def to_string(self) -> str:
        return f"{self.letter}:"


@dataclass(frozen=True, slots=True)
class UncPrefix(_PrefixBase):
    """A UNC share, e.g. ``\\\\server\\share``."""

    implies_root: ClassVar[bool] = True

    server: str
    share: str

    def to_string(self) -> str:
        return f"\\\\{self.server}\\{self.share}"


@dataclass(frozen=True, slots=True)
class DeviceNsPrefix(_PrefixBase):
    """A device namespace path, e.g. ``\\\\.\\COM42``."""

    implies_root: ClassVar[bool] = True

    name: str

    def to_string(self) -> str:
        return f"\\\\.\\{self.name}"


@dataclass(frozen=True, slots=True)
class VerbatimDiskPrefix(_PrefixBase):
    """A verbatim drive, e.g. ``\\\\?\\C:``."""

    is_verbatim: ClassVar[bool] = True

    letter: str = field(compare=False)
    drive: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "drive", self.letter.upper())

    def get_disk(self) -> str:
        return self.drive

    def to_string(self) -> str:
        return f"\\\\?\\{self.letter}:"


@dataclass(frozen=True, slots=True)
class VerbatimUncPrefix(_PrefixBase):
    """A verbatim UNC share, e.g. ``\\\\?\\UNC\\server\\share``."""

    is_verbatim: ClassVar[bool] = True
    implies_root: ClassVar[bool] = True

    server: str
    share: str

    def to_string(self) -> str:
        return f"\\\\?\\UNC\\{self.server}\\{self.share}"


@dataclass(frozen=True, slots=True)
class VerbatimGenericPrefix(_PrefixBase):
    """Any other verbatim prefix, e.g. ``\\\\?\\cat_pics``."""

    is_verbatim: ClassVar[bool] = True

    name: str

    def to_string(self) -> str:
        return f"\\\\?\\{self.name}"


Prefix = Union[
    UnixRoot,
    DiskPrefix,
    UncPrefix,
    DeviceNsPrefix,
    VerbatimDiskPrefix,
    VerbatimUncPrefix,
    VerbatimGenericPrefix,
]

UNIX_ROOT = UnixRoot()

__all__ = [
    "Prefix",
    "UnixRoot",
    "DiskPrefix",
    "UncPrefix",
    "DeviceNsPrefix",
    "VerbatimDiskPrefix",
    "VerbatimUncPrefix",
    "VerbatimGenericPrefix",
    "UNIX_ROOT",
]
