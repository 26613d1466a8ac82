from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.logging import RichHandler

from meta262.log import JSONFormatter, setup_logging


def test_json_formatter_single_line() -> None:
    record = logging.LogRecord(
        "meta262.x", logging.WARNING, __file__, 1, "hello %s", ("world",), None
    )

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "meta262.x"
    assert data["message"] == "hello world"
    assert "timestamp" in data


def test_setup_logging_writes_json_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "meta262.jsonl"
    logger = setup_logging(level="ERROR", log_file=log_file)

    logging.getLogger("meta262.extractor.corpus").info("parsed things")
    for h in logger.handlers:
        h.flush()

    (line,) = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(line)["message"] == "parsed things"


def test_setup_logging_replaces_handlers() -> None:
    setup_logging()
    logger = setup_logging(level="DEBUG")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].level == logging.DEBUG
