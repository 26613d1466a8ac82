"""Frontmatter extraction for Test262-style test files."""

from meta262.extractor.corpus import CorpusResult, ParseFailure, TestCorpus
from meta262.extractor.exceptions import FrontmatterParseError, Meta262Error, MissingFieldError
from meta262.extractor.frontmatter_loader import extract_yaml
from meta262.extractor.parser import FileRecord, parse, parse_file

__all__ = [
    # Extraction
    "FileRecord",
    "parse",
    "parse_file",
    "extract_yaml",
    # Batch loading
    "TestCorpus",
    "CorpusResult",
    "ParseFailure",
    # Errors
    "Meta262Error",
    "MissingFieldError",
    "FrontmatterParseError",
]
