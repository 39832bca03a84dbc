# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from meow.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MEOW_APP_NAME", "MEOW_LOG_LEVEL", "MEOW_DATA_DIR", "MEOW_TASKS_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Meow"
    assert s.log_level == "WARNING"
    assert s.console_log_level == logging.WARNING
    assert s.data_dir == Path(".local/meow")
    assert s.tasks_path == Path(".local/meow/tasks.txt")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MEOW_APP_NAME", "Purr")
    monkeypatch.setenv("MEOW_LOG_LEVEL", "debug")
    monkeypatch.setenv("MEOW_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "Purr"
    assert s.console_log_level == logging.DEBUG
    assert s.tasks_path == tmp_path / "tasks.txt"

    monkeypatch.setenv("MEOW_TASKS_PATH", str(tmp_path / "elsewhere.txt"))
    assert Settings.from_env().tasks_path == tmp_path / "elsewhere.txt"


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEOW_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "WARNING"
