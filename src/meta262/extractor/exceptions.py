"""Exception types raised while extracting test-file metadata."""

from __future__ import annotations


class Meta262Error(Exception):
    """Base class for meta262 errors."""


class MissingFieldError(Meta262Error):
    """Raised when a descriptor lacks a required field."""

    field: str

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'descriptor is missing "{field}"')


class FrontmatterParseError(Meta262Error):
    """Raised when the frontmatter of a file cannot be loaded as a mapping."""

    file: str
    reason: str

    def __init__(self, file: str, reason: str) -> None:
        self.file = file
        self.reason = reason
        super().__init__(f"Error loading frontmatter from file {file}\n{reason}")
