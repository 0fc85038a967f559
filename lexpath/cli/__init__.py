"""Command-line tools for lexpath."""
