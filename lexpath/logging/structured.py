"""Structured JSONL logging for filesystem operations."""

from __future__ import annotations

import json
import sys
import threading
import time
import uuid
from enum import Enum
from pathlib import Path as LogPath
from typing import Any, Dict, Optional, TextIO, Union

from .. import config
from .redaction import DataRedactor


class LogLevel(Enum):
    """Standard log levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class StructuredLogger:
    """Structured logger with consistent format and path redaction.

    One JSON object per line. Safe to share between threads.
    """

    def __init__(
        self,
        component: str,
        session_id: Optional[str] = None,
        output_file: Optional[Union[str, LogPath, TextIO]] = None,
        enable_console: bool = False,
        redactor: Optional[DataRedactor] = None,
        max_log_size_mb: Optional[int] = None,
        max_log_files: int = 5,
    ) -> None:
        """Initialize structured logger.

        Args:
            component: Component identifier (e.g., 'fs', 'scan', 'cli')
            session_id: Optional session ID for correlation
            output_file: Optional file path or handle for log output
            enable_console: Whether to output to stdout (default: False)
            redactor: Optional data redactor for path fields
            max_log_size_mb: Maximum log file size in MB before rotation (None = no limit)
            max_log_files: Maximum number of rotated log files to keep (default: 5)
        """
        self.component = component
        self.session_id = session_id or str(uuid.uuid4())[:8]
        self.start_time = time.time()
        self.redactor = redactor or DataRedactor()

        self.max_log_size_bytes = (max_log_size_mb * 1024 * 1024) if max_log_size_mb else None
        self.max_log_files = max_log_files
        self.log_file_path: Optional[LogPath] = None

        self.console_enabled = enable_console
        self.log_file: Optional[TextIO] = None
        self._lock = threading.Lock()

        if output_file:
            if isinstance(output_file, (str, LogPath)):
                self.log_file_path = LogPath(output_file)
                self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
                self._open_log_file()
            else:
                self.log_file = output_file

    def _format_log_entry(self, level: LogLevel, message: str, **context: Any) -> Dict[str, Any]:
        safe_context = self.redactor.redact_dict(context)

        return {
            "timestamp": time.time(),
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()) + "Z",
            "level": level.value,
            "component": self.component,
            "session_id": self.session_id,
            "session_time": time.time() - self.start_time,
            "message": message,
            **safe_context,
        }

    def _open_log_file(self) -> None:
        if self.log_file_path:
            self.log_file = open(self.log_file_path, "a", encoding="utf-8")

    def _rotated_name(self, index: int) -> LogPath:
        assert self.log_file_path is not None
        return self.log_file_path.with_suffix(f".{index}{self.log_file_path.suffix}")

    def _rotate_log_if_needed(self) -> None:
        """Rotate log file if size limit is exceeded."""
        if not self.log_file_path or not self.max_log_size_bytes:
            return

        try:
            if (
                self.log_file_path.exists()
                and self.log_file_path.stat().st_size > self.max_log_size_bytes
            ):
                if self.log_file:
                    self.log_file.close()

                for i in range(self.max_log_files - 1, 0, -1):
                    old_file = self._rotated_name(i)
                    new_file = self._rotated_name(i + 1)
                    if old_file.exists():
                        if new_file.exists():
                            new_file.unlink()
                        old_file.rename(new_file)

                rotated_file = self._rotated_name(1)
                if rotated_file.exists():
                    rotated_file.unlink()
                self.log_file_path.rename(rotated_file)

                self._open_log_file()
        except OSError:
            # Keep writing to the current file if rotation fails
            if not self.log_file or self.log_file.closed:
                self._open_log_file()

    def _write_log(self, entry: Dict[str, Any]) -> None:
        json_line = json.dumps(entry, default=str, separators=(",", ":"))

        with self._lock:
            if self.console_enabled:
                print(json_line, file=sys.stdout, flush=True)

            if self.log_file:
                self._rotate_log_if_needed()
                self.log_file.write(json_line + "\n")
                self.log_file.flush()

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        """Log ``message`` at ``level`` with redacted context fields."""
        self._write_log(self._format_log_entry(level, message, **context))

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)

    def critical(self, message: str, **context: Any) -> None:
        self.log(LogLevel.CRITICAL, message, **context)

    def close(self) -> None:
        """Close log file handle if open."""
        with self._lock:
            if self.log_file and hasattr(self.log_file, "close"):
                self.log_file.close()
                self.log_file = None


def create_logger(
    component: str,
    session_id: Optional[str] = None,
    log_dir: Optional[Union[str, LogPath]] = None,
    **kwargs: Any,
) -> StructuredLogger:
    """Factory function to create a structured logger from lexpath settings.

    Args:
        component: Component identifier
        session_id: Optional session ID for correlation
        log_dir: Directory for log files (defaults to ``LEXPATH_LOG_DIR``)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        Configured StructuredLogger instance; with neither a log directory nor
        console output it writes nothing.
    """
    settings = config.settings
    if log_dir is None:
        log_dir = settings.log_dir

    kwargs.setdefault("enable_console", settings.log_console)
    kwargs.setdefault("max_log_size_mb", settings.log_max_size_mb)
    kwargs.setdefault("max_log_files", settings.log_max_files)

    output_file = None
    if log_dir:
        output_file = LogPath(log_dir) / f"{component}_{session_id or 'default'}.jsonl"

    return StructuredLogger(
        component=component, session_id=session_id, output_file=output_file, **kwargs
    )


__all__ = ["LogLevel", "StructuredLogger", "create_logger"]
