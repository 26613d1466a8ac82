"""Command-line interface for meta262"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from meta262.conf import settings
from meta262.extractor.corpus import CorpusResult, ParseFailure, TestCorpus
from meta262.extractor.frontmatter_loader import extract_yaml
from meta262.log import setup_logging

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


def _collect(paths: list[Path], pattern: str | None) -> CorpusResult:
    combined = CorpusResult()
    for path in paths:
        if not path.exists():
            combined.failures.append(
                ParseFailure(file=str(path), error=FileNotFoundError(f"No such path: {path}"))
            )
            continue
        result = TestCorpus(path, pattern=pattern).parse_all()
        combined.records.extend(result.records)
        combined.failures.extend(result.failures)
    return combined


def _format_includes(includes: Any) -> str:
    if isinstance(includes, list):
        return ", ".join(str(name) for name in includes)
    return str(includes)


def _records_table(result: CorpusResult) -> Table:
    table = Table(title="Test files")
    table.add_column("File")
    table.add_column("Flags")
    table.add_column("Includes")
    table.add_column("Copyright", justify="right")

    for record in result.records:
        table.add_row(
            record.file,
            ", ".join(sorted(record.flags)),
            _format_includes(record.includes),
            str(record.copyright.count("\n")),
        )
    return table


@app.callback()
def main_options(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write JSON-lines logs to this file."),
    ] = None,
) -> None:
    """Inspect Test262-style frontmatter in test files."""
    level = "DEBUG" if verbose else settings.LOG_LEVEL
    setup_logging(level=level, log_file=log_file or settings.LOG_FILE)


@app.command()
def parse(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Test files or directories to parse."),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print parsed records as JSON."),
    ] = False,
    pattern: Annotated[
        str | None,
        typer.Option("--pattern", "-p", help="Glob for test files inside directories."),
    ] = None,
) -> None:
    """Parse test files and show their normalized attributes."""
    result = _collect(paths, pattern)

    if as_json:
        records = [record.to_dict() for record in result.records]
        print(json.dumps(records, indent=2, default=str))
    else:
        Console().print(_records_table(result))

    if result.failures:
        err = Console(stderr=True)
        for failure in result.failures:
            err.print(
                f"[red]✗ {escape(failure.file)}:[/] {escape(failure.message)}",
                highlight=False,
                soft_wrap=True,
            )
        err.print(f"[bold red]{len(result.failures)} file(s) failed[/]")
        raise typer.Exit(code=1)


@app.command()
def frontmatter(
    path: Annotated[
        Path,
        typer.Argument(help="Test file to read."),
    ],
) -> None:
    """Print the raw frontmatter text of a test file."""
    try:
        text = path.read_text(encoding=settings.ENCODING)
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise typer.Exit(code=1) from None

    print(extract_yaml(text), end="")


def main() -> None:
    app()
