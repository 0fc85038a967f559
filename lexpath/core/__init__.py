"""Lexical path core: platforms, prefixes, components and the Path value type."""

from .component import (
    Component,
    ComponentKind,
    CurrentDir,
    Normal,
    ParentDir,
    PrefixComponent,
    RootDir,
    TrailingSeparator,
)
from .parser import ParsedPrefix, parse_windows_prefix, tokenize
from .path import Path, render_components
from .platform import Platform
from .prefix import (
    DeviceNsPrefix,
    DiskPrefix,
    Prefix,
    UncPrefix,
    UnixRoot,
    VerbatimDiskPrefix,
    VerbatimGenericPrefix,
    VerbatimUncPrefix,
)

__all__ = [
    "Component",
    "ComponentKind",
    "CurrentDir",
    "Normal",
    "ParentDir",
    "PrefixComponent",
    "RootDir",
    "TrailingSeparator",
    "ParsedPrefix",
    "parse_windows_prefix",
    "tokenize",
    "Path",
    "render_components",
    "Platform",
    "Prefix",
    "UnixRoot",
    "DiskPrefix",
    "UncPrefix",
    "DeviceNsPrefix",
    "VerbatimDiskPrefix",
    "VerbatimUncPrefix",
    "VerbatimGenericPrefix",
]
