"""Structured logging for lexpath filesystem operations."""

from .redaction import DataRedactor
from .structured import LogLevel, StructuredLogger, create_logger

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
    "DataRedactor",
]
