"""The Path value type and its lexical operations.

Every method in this module is *lexical*: it works on the component
sequence only and never consults the filesystem. In particular ``..`` is
never collapsed and symlinks are never followed, so two lexically different
paths may name the same file and two lexically equal paths may not. Use the
``lexpath.fs`` facade for anything that needs the real filesystem.
"""

from __future__ import annotations

import os
import threading
import unicodedata
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..errors import InvalidArgumentError, InvalidPathError
from .component import (
    CURRENT_DIR,
    ROOT_DIR,
    Component,
    CurrentDir,
    Normal,
    ParentDir,
    PrefixComponent,
    RootDir,
    TrailingSeparator,
)
from .parser import tokenize
from .platform import Platform
from .prefix import UNIX_ROOT, Prefix, UnixRoot

_Parsed = Tuple[Optional[Prefix], Tuple[Component, ...]]
PathLike = Union["Path", str]


def _anchor_length(components: Sequence[Component]) -> int:
    """Number of leading prefix/root components."""
    length = 0
    if components and isinstance(components[0], PrefixComponent):
        length = 1
    if len(components) > length and isinstance(components[length], RootDir):
        length += 1
    return length


def _strip_trailing(components: Tuple[Component, ...]) -> Tuple[Component, ...]:
    if components and isinstance(components[-1], TrailingSeparator):
        return components[:-1]
    return components


def _is_verbatim(components: Sequence[Component]) -> bool:
    if not components:
        return False
    first = components[0]
    return isinstance(first, PrefixComponent) and first.prefix.is_verbatim


def _check_structure(components: Sequence[Component], platform: Platform) -> None:
    last = len(components) - 1
    anchors = _anchor_length(components)
    for position, component in enumerate(components):
        if isinstance(component, PrefixComponent):
            if position != 0:
                raise InvalidArgumentError("a prefix may only appear as the first component")
            if not platform.is_windows or isinstance(component.prefix, UnixRoot):
                raise InvalidArgumentError(f"{platform} paths have no prefix component")
        elif isinstance(component, RootDir):
            if position >= anchors:
                raise InvalidArgumentError("a root may only follow the prefix")
        elif isinstance(component, TrailingSeparator):
            if position != last or position <= anchors:
                raise InvalidArgumentError(
                    "a trailing separator may only end a path with at least one name"
                )
        elif not isinstance(component, (CurrentDir, ParentDir, Normal)):
            raise InvalidArgumentError(f"not a path component: {component!r}")


def render_components(components: Sequence[Component], platform: Platform) -> str:
    """Reconstruct a path string from a component sequence.

    The inverse of tokenization for any sequence tokenization can produce;
    hand-built sequences get a best-effort rendering. An empty sequence is ``.``.
    """
    if not components:
        return "."
    separator = platform.directory_separator
    head = ""
    index = 0
    if isinstance(components[0], PrefixComponent):
        head = components[0].to_string()
        index = 1
        if len(components) > 1:
            head += separator
        if index < len(components) and isinstance(components[index], RootDir):
            index += 1
    elif isinstance(components[0], RootDir):
        head = separator
        index = 1

    body = list(components[index:])
    trailing = bool(body) and isinstance(body[-1], TrailingSeparator)
    if trailing:
        body.pop()
    text = head + separator.join(component.to_string() for component in body)
    if trailing and body:
        text += separator
    return text or "."


def _normalize_joined(components: Tuple[Component, ...]) -> Tuple[Component, ...]:
    """Bring a concatenated sequence back to the shape tokenization produces."""
    verbatim = _is_verbatim(components)
    result = []
    last = len(components) - 1
    for position, component in enumerate(components):
        if isinstance(component, TrailingSeparator):
            if position == last and len(result) > _anchor_length(result):
                result.append(component)
            continue
        if isinstance(component, CurrentDir) and not verbatim and result:
            continue
        if (
            isinstance(component, RootDir)
            and result
            and not isinstance(result[-1], PrefixComponent)
        ):
            continue
        result.append(component)
    # A prefix followed by names always re-parses with a root in between.
    if (
        len(result) > 1
        and isinstance(result[0], PrefixComponent)
        and not isinstance(result[1], RootDir)
    ):
        result.insert(1, ROOT_DIR)
    return tuple(result)


class Path:
    """A filesystem path for a particular platform.

    Immutable. Parsing is lazy: a malformed string is only reported when its
    components are first needed (call ``validate()`` to force it). The parsed
    components are computed once and cached; concurrent first access is safe.

    The same string can mean different things per platform: ``C:\\`` is an
    absolute path on Windows and a relative file name on Unix.
    """

    __slots__ = ("_raw", "_platform", "_parsed", "_lock")

    def __init__(
        self, path: Union[str, "os.PathLike[str]"], platform: Optional[Platform] = None
    ) -> None:
        if isinstance(path, Path):
            if platform is None:
                platform = path._platform
            path = path._raw
        elif isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            raise InvalidPathError("path must be a string")
        self._raw: str = path
        self._platform: Platform = platform if platform is not None else Platform.default()
        self._parsed: Optional[_Parsed] = None
        self._lock = threading.Lock()

    @classmethod
    def for_platform(cls, path: str, platform: Platform) -> "Path":
        """Build a path for a specific platform."""
        return cls(path, platform)

    @classmethod
    def from_components(
        cls, components: Iterable[Component], platform: Optional[Platform] = None
    ) -> "Path":
        """Build a path eagerly from an already well-formed component sequence.

        Raises:
            InvalidArgumentError: If the sequence is structurally malformed
                (misplaced prefix, root, or trailing separator).
        """
        platform = platform if platform is not None else Platform.default()
        sequence = tuple(components)
        _check_structure(sequence, platform)
        if sequence and isinstance(sequence[0], PrefixComponent):
            prefix: Optional[Prefix] = sequence[0].prefix
        elif sequence and isinstance(sequence[0], RootDir) and not platform.is_windows:
            prefix = UNIX_ROOT
        else:
            prefix = None
        path = cls(render_components(sequence, platform), platform)
        path._parsed = (prefix, sequence)
        return path

    def _components_cached(self) -> _Parsed:
        parsed = self._parsed
        if parsed is None:
            result = tokenize(self._raw, self._platform)
            with self._lock:
                if self._parsed is None:
                    self._parsed = result
                parsed = self._parsed
        return parsed

    # ---------- Strings ----------
    @property
    def platform(self) -> Platform:
        return self._platform

    def get_platform(self) -> Platform:
        return self._platform

    def to_string(self) -> str:
        """The path string as given (or as reconstructed)."""
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Path({self._raw!r}, platform={self._platform.name})"

    def __fspath__(self) -> str:
        # Only meaningful to the OS if the path belongs to the running platform.
        self._platform.check()
        return self._raw

    def to_normalized_string(self) -> str:
        """Rebuild the string without ``.`` components or a trailing separator."""
        kept = [c for c in self.get_components() if c.to_normalized_string() is not None]
        return render_components(kept, self._platform)

    def display_ascii(self) -> str:
        """The path with every character outside printable ASCII replaced by ``?``."""
        return "".join(char if 32 <= ord(char) < 127 else "?" for char in self._raw)

    def display_utf8(self) -> str:
        """The path with control characters and lone surrogates replaced by ``?``."""
        return "".join(
            "?" if unicodedata.category(char) in ("Cc", "Cs") else char for char in self._raw
        )

    # ---------- Components ----------
    def get_components(self) -> Tuple[Component, ...]:
        """The lexical components of this path.

        Raises:
            InvalidPathError: If the path string is malformed.
        """
        return self._components_cached()[1]

    def get_prefix(self) -> Optional[Prefix]:
        """The prefix, ``UnixRoot`` for rooted Unix paths, or None."""
        return self._components_cached()[0]

    def validate(self) -> None:
        """Force parsing. Unnecessary if any other component method is called.

        Raises:
            InvalidPathError: If the path string is malformed.
        """
        self._components_cached()

    def is_absolute(self) -> bool:
        """True for a prefix followed by a root, or a rooted Unix path.

        A bare drive (``C:``) and a rooted path without drive (``\\x``) are
        relative on Windows.
        """
        components = self.get_components()
        anchors = components[: _anchor_length(components)]
        if ROOT_DIR not in anchors:
            return False
        return not self._platform.is_windows or isinstance(anchors[0], PrefixComponent)

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def has_trailing_separator(self) -> bool:
        verbatim = _is_verbatim(self.get_components())
        return self._platform.is_separator(self._raw[-1], verbatim)

    def get_lexical_parent(self) -> Optional["Path"]:
        """Remove the last component, ignoring a trailing separator.

        Not ``..`` or symlink aware; ``path.join("..")`` plus canonicalization is
        the real parent.

        Examples:
            - ``.`` -> None, ``/`` -> None, ``C:\\`` -> None
            - ``index.html`` -> ``.``, ``..`` -> ``.``
            - ``a/b/`` -> ``a``
        """
        components = _strip_trailing(self.get_components())
        anchors = _anchor_length(components)
        body = components[anchors:]
        if not body:
            return None
        if anchors == 0 and body == (CURRENT_DIR,):
            return None
        remaining = components[:-1]
        if not remaining:
            return Path.from_components((CURRENT_DIR,), self._platform)
        return Path.from_components(remaining, self._platform)

    def get_file_name(self) -> Optional[str]:
        """The last name, ``.`` or ``..``; None if the path is only a prefix/root."""
        for component in reversed(self.get_components()):
            if isinstance(component, TrailingSeparator):
                continue
            if isinstance(component, (Normal, CurrentDir, ParentDir)):
                return component.to_string()
            return None
        return None

    def _split_file_name(self) -> Optional[Tuple[str, Optional[str]]]:
        name = self.get_file_name()
        if name is None or name == "." or name == "..":
            return None
        pos = name.rfind(".")
        if pos <= 0:
            return name, None
        return name[:pos], name[pos + 1 :]

    def get_base_name(self) -> Optional[str]:
        """The file name without its extension.

        A leading dot never starts an extension.

        Examples:
            - ``.gitignore`` -> ``.gitignore``
            - ``index.d.ts`` -> ``index.d``
        """
        split = self._split_file_name()
        return split[0] if split is not None else None

    def get_extension(self) -> Optional[str]:
        """The text after the last non-leading dot of the file name, or None."""
        split = self._split_file_name()
        return split[1] if split is not None else None

    def with_extension(self, extension: Optional[str]) -> "Path":
        """Return a copy with the extension replaced, or removed if ``extension`` is empty.

        Raises:
            InvalidArgumentError: If the path ends with a prefix, root, ``.`` or
                ``..``, or the new file name is not valid on this platform.
        """
        base = self.get_base_name()
        if base is None:
            raise InvalidArgumentError(
                "cannot use with_extension on paths ending with a prefix, root, . or .."
            )
        name = f"{base}.{extension}" if extension else base
        if name == "." or name == "..":
            raise InvalidArgumentError(f"{name!r} is not a file name")
        components = _strip_trailing(self.get_components())
        try:
            self._platform.validate_component_name(name, _is_verbatim(components))
        except InvalidPathError as exc:
            raise InvalidArgumentError(str(exc)) from exc
        return Path.from_components(components[:-1] + (Normal(name),), self._platform)

    # ---------- Combining ----------
    def _coerce(self, other: PathLike) -> "Path":
        if isinstance(other, Path):
            if other._platform is not self._platform:
                raise InvalidArgumentError(
                    f"cannot combine a {other._platform} path with a {self._platform} path"
                )
            return other
        if isinstance(other, str):
            return Path(other, self._platform)
        raise InvalidArgumentError("path must be a str or Path")

    @staticmethod
    def _overrides(other: "Path") -> bool:
        if other.is_absolute():
            return True
        components = other.get_components()
        return bool(components) and isinstance(components[0], PrefixComponent)

    def join(self, other: PathLike) -> "Path":
        """Lexically append ``other``, treating this path as a directory.

        An absolute ``other`` (or one with its own prefix) is returned as is. On
        Windows a rooted ``other`` without prefix keeps only this path's prefix.

        Raises:
            InvalidArgumentError: If ``other`` belongs to another platform.
        """
        other = self._coerce(other)
        if self._overrides(other):
            return other
        other_components = other.get_components()
        base = _strip_trailing(self.get_components())
        if _anchor_length(other_components):
            kept = base[:1] if base and isinstance(base[0], PrefixComponent) else ()
            combined = kept + other_components
        else:
            combined = base + other_components
        return Path.from_components(_normalize_joined(combined), self._platform)

    def resolve(self, other: PathLike) -> "Path":
        """Lexically resolve ``other`` relative to this path, like a link in HTML.

        Examples:
            - ``a/b/`` resolving ``c`` -> ``a/b/c``
            - ``a/b`` resolving ``c`` -> ``a/c``
        """
        other = self._coerce(other)
        if self._overrides(other):
            return other
        if self.has_trailing_separator():
            return self.join(other)
        components = _strip_trailing(self.get_components())
        anchors = _anchor_length(components)
        body = components[anchors:]
        if not body or (anchors == 0 and body == (CURRENT_DIR,)):
            return self.join(other)
        if anchors == 0 and len(body) == 1:
            return other
        return Path.from_components(components[:-1], self._platform).join(other)

    def strip_prefix(self, prefix: PathLike) -> Optional["Path"]:
        """Return the part of this path after ``prefix``, or None if it is not a prefix.

        Purely component-wise; a trailing separator on ``prefix`` is ignored.
        """
        if isinstance(prefix, str):
            prefix = Path(prefix, self._platform)
        if prefix._platform is not self._platform:
            return None
        mine = self.get_components()
        theirs = _strip_trailing(prefix.get_components())
        if len(theirs) > len(mine) or mine[: len(theirs)] != theirs:
            return None
        rest = mine[len(theirs) :]
        if rest and isinstance(rest[0], TrailingSeparator):
            rest = ()
        return Path.from_components(rest, self._platform)

    def starts_with(self, base: PathLike) -> bool:
        """Whether the path lexically starts with the components of ``base``."""
        return self.strip_prefix(base) is not None

    def ends_with(self, child: PathLike) -> bool:
        """Whether the path lexically ends with the components of ``child``."""
        if isinstance(child, str):
            child = Path(child, self._platform)
        if child._platform is not self._platform:
            return False
        tail = _strip_trailing(child.get_components())
        if tail[:1] == (CURRENT_DIR,):
            tail = tail[1:]
        mine = _strip_trailing(self.get_components())
        if len(tail) > len(mine):
            return False
        return mine[len(mine) - len(tail) :] == tail

    # ---------- Platform ----------
    def to_current_platform(self) -> Optional["Path"]:
        """Explicitly convert to the running platform, or None if impossible.

        Absolute and rooted paths never convert; nor do paths with names that
        are invalid on the running platform.
        """
        current = Platform.current()
        if self._platform is current:
            return self
        components = self.get_components()
        if _anchor_length(components):
            return None
        for component in components:
            if isinstance(component, Normal):
                try:
                    current.validate_component_name(component.name)
                except InvalidPathError:
                    return None
        return Path.from_components(components, current)

    # ---------- Equality ----------
    def equals(self, other: "Path") -> bool:
        """Exact component equality: no ``..`` cancellation, no verbatim stripping."""
        return self._platform is other._platform and self.get_components() == other.get_components()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._platform, self.get_components()))


__all__ = ["Path", "render_components"]
