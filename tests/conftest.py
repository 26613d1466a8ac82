from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep tests hermetic: no stray .env or META262_* variables."""

    monkeypatch.chdir(tmp_path)
    for name in ["META262_ENCODING", "META262_TEST_GLOB", "META262_LOG_LEVEL", "META262_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)

    yield


@pytest.fixture(autouse=True)
def _reset_meta262_logger() -> Iterator[None]:
    """Undo handlers installed by setup_logging so caplog keeps working."""

    yield

    logger = logging.getLogger("meta262")
    for h in list(logger.handlers):
        try:
            h.close()
        finally:
            logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """A small test tree with valid, broken and non-test files."""

    root = tmp_path / "test"
    (root / "sub").mkdir(parents=True)

    (root / "a.js").write_text(
        "// Copyright (C) 2024 Example. All rights reserved.\n"
        "/*---\n"
        "description: first test\n"
        "flags: [onlyStrict]\n"
        "includes: [propertyHelper.js]\n"
        "---*/\n"
        "var a = 1;\n",
        encoding="utf-8",
    )
    (root / "sub" / "b.js").write_text("var b = 2;\n", encoding="utf-8")
    (root / "notes.txt").write_text("not a test\n", encoding="utf-8")

    return root
