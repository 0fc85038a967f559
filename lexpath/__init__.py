"""lexpath: cross-platform lexical filesystem paths.

Parse Unix and Windows path strings (drives, UNC shares, device and verbatim
namespaces) into components and work with them without touching the disk.
The ``lexpath.fs`` facade adds the filesystem operations.
"""

from .core import (
    Component,
    ComponentKind,
    CurrentDir,
    DeviceNsPrefix,
    DiskPrefix,
    Normal,
    ParentDir,
    Path,
    Platform,
    Prefix,
    PrefixComponent,
    RootDir,
    TrailingSeparator,
    UncPrefix,
    UnixRoot,
    VerbatimDiskPrefix,
    VerbatimGenericPrefix,
    VerbatimUncPrefix,
)
from .errors import (
    InvalidArgumentError,
    InvalidPathError,
    LexPathError,
    PathIOError,
    PlatformMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    "Path",
    "Platform",
    "Component",
    "ComponentKind",
    "PrefixComponent",
    "RootDir",
    "CurrentDir",
    "ParentDir",
    "Normal",
    "TrailingSeparator",
    "Prefix",
    "UnixRoot",
    "DiskPrefix",
    "UncPrefix",
    "DeviceNsPrefix",
    "VerbatimDiskPrefix",
    "VerbatimUncPrefix",
    "VerbatimGenericPrefix",
    "LexPathError",
    "InvalidPathError",
    "InvalidArgumentError",
    "PathIOError",
    "PlatformMismatchError",
]
