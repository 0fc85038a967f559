"""lexpath runtime configuration.

All settings are backed by environment variables following the LEXPATH_*
naming convention. No side effects on import beyond reading the environment.

Example:
    >>> from lexpath.config import settings
    >>> settings.default_platform
    'auto'

Environment Variables:
    LEXPATH_DEFAULT_PLATFORM: Platform for ``Path(s)`` without an explicit one:
        auto|unix|windows (default: auto)
    LEXPATH_LOG_DIR: Directory for JSONL filesystem logs (default: unset)
    LEXPATH_LOG_CONSOLE: Echo filesystem log lines to stdout (default: false)
    LEXPATH_LOG_MAX_SIZE_MB: Rotate log files above this size (default: unset)
    LEXPATH_LOG_MAX_FILES: Rotated log files to keep (default: 5)
    LEXPATH_SCAN_WITH_SYMLINKS: Yield symlinks from recursive scans (default: false)
    LEXPATH_MKDIR_MODE: Default mode for created directories (default: 0o777)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_PREFIX = "LEXPATH_"
_PLATFORM_CHOICES = ("auto", "unix", "windows")


def _env(name: str, default: str) -> str:
    """Get environment variable with LEXPATH_* prefix validation."""
    if not name.startswith(_PREFIX):
        raise ValueError(f"Only {_PREFIX}* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "")
    return raw or None


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Get environment variable as integer; accepts 0o/0x literals."""
    raw = _env(name, str(default))
    try:
        return int(raw, 0)
    except Exception:
        return default


def _env_optional_int(name: str) -> Optional[int]:
    raw = _env_optional(name)
    if raw is None:
        return None
    try:
        return int(raw, 0)
    except Exception:
        return None


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for lexpath.

    Frozen to prevent accidental mutation at runtime. For testing, override
    environment variables and reload this module, or monkeypatch the
    module-level ``settings`` instance.
    """

    default_platform: str = _env_choice("LEXPATH_DEFAULT_PLATFORM", "auto", _PLATFORM_CHOICES)

    # Filesystem logging
    log_dir: Optional[str] = _env_optional("LEXPATH_LOG_DIR")
    log_console: bool = _env_bool("LEXPATH_LOG_CONSOLE", False)
    log_max_size_mb: Optional[int] = _env_optional_int("LEXPATH_LOG_MAX_SIZE_MB")
    log_max_files: int = _env_int("LEXPATH_LOG_MAX_FILES", 5)

    # Filesystem defaults
    scan_with_symlinks: bool = _env_bool("LEXPATH_SCAN_WITH_SYMLINKS", False)
    mkdir_mode: int = _env_int("LEXPATH_MKDIR_MODE", 0o777)


# Module-level instance for convenient access
settings = Settings()

__all__ = ["settings", "Settings"]
