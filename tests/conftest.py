# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from meow.cli.commands import CommandRegistry, create_registry
from meow.core.persona import Persona
from meow.core.state import AppState
from meow.tasks.task_list import TaskList
from meow.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Meow",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with the real flat-file store.

    The file round-trip is part of what the dispatcher tests check.
    """
    return AppState(settings=settings, tasks=TaskList(), storage=store, persona=Persona())


@pytest.fixture()
def registry() -> CommandRegistry:
    return create_registry()
