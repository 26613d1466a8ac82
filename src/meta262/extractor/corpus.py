"""Load and parse a directory of test files.

The corpus discovers files by glob, reads them from disk and runs each one
through the extractor. ``parse_all`` keeps going past broken files and
reports them as failures, so one bad fixture does not hide the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from meta262.conf import settings
from meta262.extractor.exceptions import Meta262Error
from meta262.extractor.parser import FileRecord, parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseFailure:
    """A test file that could not be read or parsed."""

    file: str
    error: Exception

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class CorpusResult:
    """Records and failures collected from one pass over the corpus."""

    records: list[FileRecord] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class TestCorpus:
    """Discover test files under a root and parse them on demand."""

    # Not a pytest test class despite the name.
    __test__ = False

    root: Path
    pattern: str
    encoding: str

    def __init__(self, root: Path, pattern: str | None = None, encoding: str | None = None):
        """Initialize the corpus.

        Args:
            root: Directory to scan, or a single test file
            pattern: Glob selecting test files (defaults to settings.TEST_GLOB)
            encoding: Text encoding of the files (defaults to settings.ENCODING)
        """
        self.root = root
        self.pattern = pattern or settings.TEST_GLOB
        self.encoding = encoding or settings.ENCODING

    def discover(self) -> list[Path]:
        """Return sorted test file paths under the root."""
        if not self.root.exists():
            logger.debug(f"Corpus root {self.root} does not exist, no files found")
            return []

        if self.root.is_file():
            return [self.root]

        return sorted(p for p in self.root.glob(self.pattern) if p.is_file())

    def _relative_name(self, path: Path) -> str:
        if self.root.is_file():
            return path.name
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def load(self, path: Path) -> FileRecord:
        """Read and parse one test file.

        Raises:
            MissingFieldError: If the file is empty
            FrontmatterParseError: If its frontmatter is invalid
            OSError: If the file cannot be read
        """
        contents = path.read_text(encoding=self.encoding)
        record = parse({"file": self._relative_name(path), "contents": contents, "path": path})
        logger.debug(f"Parsed {record.file}: flags={sorted(record.flags)}")
        return record

    def iter_records(self) -> Iterator[FileRecord]:
        """Yield a record per discovered file, stopping at the first error."""
        for path in self.discover():
            yield self.load(path)

    def parse_all(self) -> CorpusResult:
        """Parse every discovered file, collecting failures instead of raising."""
        result = CorpusResult()

        for path in self.discover():
            try:
                result.records.append(self.load(path))
            except (Meta262Error, OSError, UnicodeDecodeError) as e:
                name = self._relative_name(path)
                logger.warning(f"Failed to parse test file {name}: {e}")
                result.failures.append(ParseFailure(file=name, error=e))

        logger.info(
            f"Parsed {len(result.records)} test files under {self.root} "
            f"({len(result.failures)} failed)"
        )
        return result
