"""Prefix grammar and component tokenization.

Pure functions, no filesystem I/O. ``parse_windows_prefix`` disambiguates the
Windows prefix forms; ``tokenize`` turns a raw string into the ordered
component sequence every lexical operation is built on.

Windows prefix grammar (first match wins)::

    \\\\?\\UNC\\server\\share   verbatim UNC
    \\\\?\\X:                  verbatim disk
    \\\\?\\name                verbatim generic
    \\\\.\\device              device namespace
    \\\\server\\share          UNC
    X:                       disk (``X:name`` is rejected)

Inside a verbatim prefix only ``\\`` separates; elsewhere ``/`` does too.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import InvalidPathError
from .component import (
    CURRENT_DIR,
    PARENT_DIR,
    ROOT_DIR,
    TRAILING_SEPARATOR,
    Component,
    Normal,
    PrefixComponent,
)
from .platform import Platform
from .prefix import (
    UNIX_ROOT,
    DeviceNsPrefix,
    DiskPrefix,
    Prefix,
    UncPrefix,
    VerbatimDiskPrefix,
    VerbatimGenericPrefix,
    VerbatimUncPrefix,
)

_VERBATIM_SEPARATORS = "\\"
_SEPARATORS = "\\/"


@dataclass(frozen=True)
class ParsedPrefix:
    """Result of prefix parsing.

    ``consumed`` counts the prefix plus the separator right after it, if any;
    ``separator_followed`` records whether that separator was present.
    """

    prefix: Optional[Prefix]
    consumed: int
    separator_followed: bool


NO_PREFIX = ParsedPrefix(None, 0, False)


def _is_drive_letter(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def _find_separator(raw: str, start: int, separators: str) -> int:
    for index in range(start, len(raw)):
        if raw[index] in separators:
            return index
    return -1


def _take_segment(raw: str, start: int, separators: str) -> Tuple[str, int, bool]:
    """Read up to the next separator; return (segment, next index, separator found)."""
    pos = _find_separator(raw, start, separators)
    if pos == -1:
        return raw[start:], len(raw), False
    return raw[start:pos], pos + 1, True


def _take_unc(raw: str, start: int, separators: str) -> Tuple[str, str, int, bool]:
    server, index, found = _take_segment(raw, start, separators)
    if not found:
        return server, "", index, False
    share, index, found = _take_segment(raw, index, separators)
    return server, share, index, found


def parse_windows_prefix(raw: str) -> ParsedPrefix:
    """Parse the Windows prefix at the start of ``raw``.

    Raises:
        InvalidPathError: For a drive letter followed by a name (``C:foo``).
    """
    if raw.startswith("\\\\"):
        index = 2

        if raw.startswith("?\\", index):
            index += 2

            if raw.startswith("UNC\\", index):
                index += 4
                server, share, index, followed = _take_unc(raw, index, _VERBATIM_SEPARATORS)
                return ParsedPrefix(VerbatimUncPrefix(server, share), index, followed)

            if (
                len(raw) - index >= 2
                and _is_drive_letter(raw[index])
                and raw[index + 1] == ":"
                and (len(raw) == index + 2 or raw[index + 2] in _VERBATIM_SEPARATORS)
            ):
                letter = raw[index]
                index += 2
                followed = index < len(raw)
                return ParsedPrefix(VerbatimDiskPrefix(letter), index + int(followed), followed)

            name, index, followed = _take_segment(raw, index, _VERBATIM_SEPARATORS)
            return ParsedPrefix(VerbatimGenericPrefix(name), index, followed)

        if raw.startswith(".\\", index):
            index += 2
            name, index, followed = _take_segment(raw, index, _SEPARATORS)
            return ParsedPrefix(DeviceNsPrefix(name), index, followed)

        server, share, index, followed = _take_unc(raw, index, _SEPARATORS)
        return ParsedPrefix(UncPrefix(server, share), index, followed)

    if len(raw) >= 2 and raw[1] == ":" and _is_drive_letter(raw[0]):
        if len(raw) == 2:
            return ParsedPrefix(DiskPrefix(raw[0]), 2, False)
        if raw[2] in _SEPARATORS:
            return ParsedPrefix(DiskPrefix(raw[0]), 3, True)
        raise InvalidPathError("the : character is not allowed in Windows path components")

    return NO_PREFIX


def _split_tokens(raw: str, start: int, platform: Platform, verbatim: bool) -> List[str]:
    tokens: List[str] = []
    current: List[str] = []
    for char in raw[start:]:
        if platform.is_separator(char, verbatim):
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return tokens


def tokenize(raw: str, platform: Platform) -> Tuple[Optional[Prefix], Tuple[Component, ...]]:
    """Split ``raw`` into its prefix and lexical components.

    Deterministic and pure: equal inputs always give equal outputs.

    Raises:
        InvalidPathError: If ``raw`` is empty or any part of it is malformed.
    """
    if not raw:
        raise InvalidPathError("empty path is nonsensical")

    components: List[Component] = []
    verbatim = False

    if platform.is_windows:
        parsed = parse_windows_prefix(raw)
        prefix = parsed.prefix
        index = parsed.consumed
        if prefix is not None:
            components.append(PrefixComponent(prefix))
            verbatim = prefix.is_verbatim
            rooted = parsed.separator_followed or prefix.implies_root
        else:
            rooted = platform.is_separator(raw[0])
            index = 1 if rooted else 0
    else:
        rooted = raw[0] == "/"
        prefix = UNIX_ROOT if rooted else None
        index = 1 if rooted else 0

    if rooted:
        components.append(ROOT_DIR)
    anchored = bool(components)

    tokens = _split_tokens(raw, index, platform, verbatim)
    emitted = False
    last = len(tokens) - 1
    for position, token in enumerate(tokens):
        if token == "":
            if position == last and emitted:
                components.append(TRAILING_SEPARATOR)
            continue
        if token == ".":
            if verbatim or (position == 0 and not anchored):
                components.append(CURRENT_DIR)
                emitted = True
            continue
        if token == "..":
            components.append(PARENT_DIR)
            emitted = True
            continue
        platform.validate_component_name(token, verbatim)
        components.append(Normal(token))
        emitted = True

    return prefix, tuple(components)


__all__ = ["ParsedPrefix", "NO_PREFIX", "parse_windows_prefix", "tokenize"]
