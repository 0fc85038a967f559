"""Path redaction for structured filesystem logs."""

from __future__ import annotations

import os
import re
from typing import Any, Dict, List, Optional, Pattern, Union

from ..core.path import Path
from ..errors import InvalidPathError


class DataRedactor:
    """Redact host-identifying information from log data."""

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns = [
            # UNC and verbatim UNC authorities: keep nothing of server/share
            re.compile(r"\\\\(?:\?\\UNC\\)?[^\\/\s]+[\\/][^\\/\s]+"),
            # User home directories
            re.compile(r"/home/[^/\s]+"),
            re.compile(r"/Users/[^/\s]+"),
            re.compile(r"[A-Za-z]:\\Users\\[^\\\s]+"),
            # Tokens and API keys that end up in paths or messages
            re.compile(
                r'(token|key|secret|password|credential)["\']?\s*[=:]\s*["\']?[a-zA-Z0-9_-]{8,}["\']?',
                re.IGNORECASE,
            ),
        ]

        if custom_patterns:
            self.patterns.extend(custom_patterns)

        # Field names whose values are replaced entirely
        self.sensitive_fields = {
            "password",
            "token",
            "secret",
            "key",
            "auth",
            "credential",
            "api_key",
        }

    def redact_string(self, text: str) -> str:
        """Replace every pattern match in ``text`` with ``[REDACTED]``."""
        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_path(self, path: Union[str, Path, "os.PathLike[str]"]) -> str:
        """Hide the directory structure of ``path``, keeping only its file name.

        lexpath paths are split by their own platform rules, so a Windows path
        logged on a Unix host is still reduced to its file name.
        """
        try:
            if not isinstance(path, Path):
                path = Path(os.fspath(path))
            name = path.get_file_name()
        except InvalidPathError:
            return "[REDACTED]"
        if name is None:
            return "[REDACTED]"
        return f"[REDACTED]/{name}"

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact sensitive data from a dictionary."""
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if key.lower() in self.sensitive_fields:
                result[key] = "[REDACTED]"
                continue

            if isinstance(value, dict):
                result[key] = self.redact_dict(value)
            elif isinstance(value, list):
                result[key] = [
                    self.redact_dict(item)
                    if isinstance(item, dict)
                    else self.redact_path(item)
                    if isinstance(item, Path)
                    else self.redact_string(item)
                    if isinstance(item, str)
                    else item
                    for item in value
                ]
            elif isinstance(value, Path):
                result[key] = self.redact_path(value)
            elif isinstance(value, str):
                result[key] = self.redact_string(value)
            else:
                result[key] = value

        return result

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        """Add custom redaction pattern."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)

    def add_sensitive_field(self, field_name: str) -> None:
        """Add field name to redact entirely (case-insensitive)."""
        self.sensitive_fields.add(field_name.lower())


__all__ = ["DataRedactor"]
