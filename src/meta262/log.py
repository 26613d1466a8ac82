"""Logging setup.

meta262 uses two logging surfaces:
- rich-colored stderr output (human-readable)
- an optional JSON-lines file (machine-readable)

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, by the CLI.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing_extensions import override

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("meta262")


class JSONFormatter(logging.Formatter):
    """Format log records as a single-line JSON object."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(log_obj)


def setup_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Attach console (and optionally JSON file) handlers to the meta262 logger.

    Calling this again replaces the previous handlers instead of stacking them.
    """
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for h in list(logger.handlers):
        try:
            h.close()
        finally:
            logger.removeHandler(h)

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        json_handler = logging.FileHandler(log_file, encoding="utf-8")
        json_handler.setLevel(logging.DEBUG)
        json_handler.setFormatter(JSONFormatter())
        logger.addHandler(json_handler)

    return logger
