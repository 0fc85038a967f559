"""Lexical path components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from .prefix import Prefix


class ComponentKind(Enum):
    """Discriminator for the component variants."""

    PREFIX = "prefix"
    ROOT_DIR = "root_dir"
    CURRENT_DIR = "current_dir"
    PARENT_DIR = "parent_dir"
    NORMAL = "normal"
    TRAILING_SEPARATOR = "trailing_separator"


class _ComponentBase:
    __slots__ = ()

    kind: ClassVar[ComponentKind]

    def to_string(self) -> str:
        """Literal text of this component, without separators."""
        raise NotImplementedError

    def to_normalized_string(self) -> Optional[str]:
        """Text used in normalized output, or None if the component is dropped."""
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class PrefixComponent(_ComponentBase):
    """The prefix of an absolute (or drive-relative) path."""

    kind: ClassVar[ComponentKind] = ComponentKind.PREFIX

    prefix: Prefix

    def to_string(self) -> str:
        return self.prefix.to_string()


@dataclass(frozen=True, slots=True)
class RootDir(_ComponentBase):
    """The root separator directly after the prefix (or at the start)."""

    kind: ClassVar[ComponentKind] = ComponentKind.ROOT_DIR

    def to_string(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class CurrentDir(_ComponentBase):
    """A ``.`` component.

    Only kept at the start of a relative path, or anywhere in a verbatim path.
    """

    kind: ClassVar[ComponentKind] = ComponentKind.CURRENT_DIR

    def to_string(self) -> str:
        return "."

    def to_normalized_string(self) -> Optional[str]:
        return None


@dataclass(frozen=True, slots=True)
class ParentDir(_ComponentBase):
    """A ``..`` component. Never collapsed lexically."""

    kind: ClassVar[ComponentKind] = ComponentKind.PARENT_DIR

    def to_string(self) -> str:
        return ".."


@dataclass(frozen=True, slots=True)
class Normal(_ComponentBase):
    """A regular file or directory name."""

    kind: ClassVar[ComponentKind] = ComponentKind.NORMAL

    name: str

    def to_string(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class TrailingSeparator(_ComponentBase):
    """Marks a separator at the very end of the path."""

    kind: ClassVar[ComponentKind] = ComponentKind.TRAILING_SEPARATOR

    def to_string(self) -> str:
        return ""

    def to_normalized_string(self) -> Optional[str]:
        return None


Component = Union[PrefixComponent, RootDir, CurrentDir, ParentDir, Normal, TrailingSeparator]

ROOT_DIR = RootDir()
CURRENT_DIR = CurrentDir()
PARENT_DIR = ParentDir()
TRAILING_SEPARATOR = TrailingSeparator()

__all__ = [
    "Component",
    "ComponentKind",
    "PrefixComponent",
    "RootDir",
    "CurrentDir",
    "ParentDir",
    "Normal",
    "TrailingSeparator",
    "ROOT_DIR",
    "CURRENT_DIR",
    "PARENT_DIR",
    "TRAILING_SEPARATOR",
]
