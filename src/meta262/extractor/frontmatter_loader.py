"""Utilities for splitting a test file into copyright, YAML frontmatter and body.

Frontmatter sits between the literal ``/*---`` and ``---*/`` markers. Both
marker searches start at the beginning of the text, so a stray ``---*/``
ahead of the opener changes what gets sliced.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from meta262.extractor.exceptions import FrontmatterParseError

YAML_START = "/*---"
YAML_END = "---*/"

# Leading run of // comment lines. A line may not contain \r, U+2028 or U+2029.
COPYRIGHT_PATTERN = re.compile("(?://[^\n\r\u2028\u2029]*\n)*")


def _substring(text: str, start: int, end: int) -> str:
    # Negative bounds clamp to 0 and reversed bounds swap.
    start = min(max(start, 0), len(text))
    end = min(max(end, 0), len(text))
    if start > end:
        start, end = end, start
    return text[start:end]


def extract_copyright(contents: str) -> str:
    """Return the leading block of ``//`` comment lines, or an empty string."""
    match = COPYRIGHT_PATTERN.match(contents)
    return match.group(0) if match else ""


def extract_yaml(text: str) -> str:
    """Extract the raw YAML frontmatter from a test file.

    Args:
        text: Full text of the test file

    Returns:
        The text between the markers, or an empty string if there is no
        opening marker. Without a closing marker this is everything up to
        and including the opening marker.
    """
    start = text.find(YAML_START)
    if start == -1:
        return ""

    end = text.find(YAML_END)
    return _substring(text, start + len(YAML_START), end)


def extract_body(contents: str) -> str:
    """Return the text after the first closing marker, or all of it."""
    end = contents.find(YAML_END)
    if end == -1:
        return contents
    return contents[end + len(YAML_END) :]


def load_attrs(file: str, contents: str) -> dict[str, Any]:
    """Parse the frontmatter of ``contents`` into raw, unnormalized attributes.

    Raises:
        FrontmatterParseError: If the YAML is invalid or not a mapping
    """
    extracted = extract_yaml(contents)
    if not extracted:
        return {}

    try:
        attrs = yaml.safe_load(extracted)
    except yaml.YAMLError as e:
        raise FrontmatterParseError(file, str(e)) from e

    if attrs is None:
        return {}
    if not isinstance(attrs, dict):
        raise FrontmatterParseError(
            file, f"frontmatter must be a mapping, got {type(attrs).__name__}"
        )
    return attrs


def normalize_attrs(file: str, attrs: dict[str, Any]) -> dict[str, Any]:
    """Ensure ``flags`` and ``includes`` exist in their conventional shapes.

    ``flags`` becomes a ``{name: True}`` mapping. ``includes`` defaults to an
    empty list and is otherwise kept as written, even when it is not a list.
    Other keys are copied unchanged; ``attrs`` is not mutated.
    """
    flags = attrs.get("flags") or []
    includes = attrs.get("includes") or []

    if not isinstance(flags, list):
        raise FrontmatterParseError(file, "'flags' must be a list")

    normalized = dict(attrs)
    normalized["flags"] = {str(flag): True for flag in flags}
    normalized["includes"] = list(includes) if isinstance(includes, list) else includes
    return normalized
