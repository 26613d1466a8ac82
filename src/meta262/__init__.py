"""meta262 package public API."""

from .extractor import FileRecord, extract_yaml, parse

# Re-export for convenience (used by library callers and `meta262.cli`).
__all__ = ["FileRecord", "extract_yaml", "parse"]
