"""Parse a test-file descriptor into an frozen FileRecord.

A descriptor is a mapping with at least ``file`` and ``contents``. Any other
keys are carried onto the record as ``extra``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from meta262.extractor.exceptions import MissingFieldError
from meta262.extractor.frontmatter_loader import (
    extract_body,
    extract_copyright,
    load_attrs,
    normalize_attrs,
)

# Fields computed by parse(); never taken from the descriptor's extras.
RECORD_FIELDS = ("file", "contents", "copyright", "attrs")


@dataclass(frozen=True)
class FileRecord:
    """Result of parsing one test file.

    Fields cannot be reassigned. The ``attrs`` and ``extra`` containers are
    plain dicts and are read-only by convention; ``to_dict()`` hands out deep
    copies so callers can change its output without touching the record.
    """

    file: str
    contents: str
    copyright: str
    attrs: dict[str, Any]
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def flags(self) -> dict[str, bool]:
        return self.attrs["flags"]

    @property
    def includes(self) -> Any:
        return self.attrs["includes"]

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the record contract: extras first, computed fields on top."""
        return {
            **copy.deepcopy(self.extra),
            "file": self.file,
            "contents": self.contents,
            "copyright": self.copyright,
            "attrs": copy.deepcopy(self.attrs),
        }


def parse(descriptor: Mapping[str, Any]) -> FileRecord:
    """Extract copyright, frontmatter and body from a test file.

    Args:
        descriptor: Mapping with ``file`` and ``contents`` plus optional extras

    Returns:
        FileRecord with normalized attributes and the body after the frontmatter

    Raises:
        MissingFieldError: If ``file`` or ``contents`` is absent or empty
        FrontmatterParseError: If the frontmatter is not a valid YAML mapping
    """
    file = descriptor.get("file")
    if not file:
        raise MissingFieldError("file")

    contents = descriptor.get("contents")
    if not contents:
        raise MissingFieldError("contents")

    attrs = normalize_attrs(file, load_attrs(file, contents))
    extra = {k: v for k, v in descriptor.items() if k not in RECORD_FIELDS}

    return FileRecord(
        file=file,
        contents=extract_body(contents),
        copyright=extract_copyright(contents),
        attrs=attrs,
        extra=extra,
    )


# Name used by batch callers; identical to parse().
parse_file = parse
