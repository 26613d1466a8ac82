from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from meta262.conf import Settings


def test_defaults() -> None:
    s = Settings()

    assert s.ENCODING == "utf-8"
    assert s.TEST_GLOB == "**/*.js"
    assert s.LOG_LEVEL == "WARNING"
    assert s.LOG_FILE is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("META262_TEST_GLOB", "test/**/*.js")
    monkeypatch.setenv("META262_LOG_LEVEL", "debug")
    monkeypatch.setenv("META262_LOG_FILE", str(tmp_path / "log.jsonl"))

    s = Settings()

    assert s.TEST_GLOB == "test/**/*.js"
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_FILE == tmp_path / "log.jsonl"


def test_dotenv_file(tmp_path: Path) -> None:
    # conftest chdirs into tmp_path
    (tmp_path / ".env").write_text("META262_ENCODING=latin-1\n", encoding="utf-8")

    assert Settings().ENCODING == "latin-1"


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("META262_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings()
