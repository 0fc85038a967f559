"""Show how lexpath parses a path string.

Usage: python -m lexpath.cli.inspect PATH [--platform unix|windows] [--json]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from lexpath.core.path import Path
from lexpath.core.platform import Platform
from lexpath.errors import InvalidPathError


def describe(path: Path) -> Dict[str, Any]:
    """Lexical summary of ``path``. Forces parsing."""
    prefix = path.get_prefix()
    parent = path.get_lexical_parent()
    return {
        "path": path.to_string(),
        "platform": path.platform.value,
        "prefix": None if prefix is None else type(prefix).__name__,
        "prefix_text": None if prefix is None else prefix.to_string(),
        "components": [
            {"kind": c.kind.value, "text": c.to_string()} for c in path.get_components()
        ],
        "absolute": path.is_absolute(),
        "trailing_separator": path.has_trailing_separator(),
        "normalized": path.to_normalized_string(),
        "parent": None if parent is None else parent.to_string(),
        "file_name": path.get_file_name(),
        "base_name": path.get_base_name(),
        "extension": path.get_extension(),
    }


def _format_text(info: Dict[str, Any]) -> str:
    lines: List[str] = []
    for key, value in info.items():
        if key == "components":
            lines.append("components:")
            for component in value:
                lines.append(f"  {component['kind']:<20} {component['text']!r}")
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Show how lexpath parses a path string")
    ap.add_argument("path")
    ap.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="interpret PATH for this platform (default: LEXPATH_DEFAULT_PLATFORM)",
    )
    ap.add_argument("--json", action="store_true", help="print a JSON object")
    args = ap.parse_args(argv)

    platform = Platform(args.platform) if args.platform else None
    try:
        info = describe(Path(args.path, platform))
    except InvalidPathError as exc:
        print(f"[inspect] invalid path: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(info, indent=2))
    else:
        print(_format_text(info))
    return 0


if __name__ == "__main__":
    sys.exit(main())
