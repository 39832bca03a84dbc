# src/meow/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store and persona into AppState,
- loads the saved task list (best-effort).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.persona import Persona
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import StorageError, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    state = AppState(
        settings=settings,
        tasks=TaskList(),
        storage=store,
        persona=Persona(name=str(getattr(settings, "app_name", "Meow"))),
    )

    try:
        state.tasks = TaskList(store.load())
    except StorageError as e:
        logger.error("Failed to load tasks: %s", e)
        state.notices.append(
            f"Could not load saved tasks ({e}). Starting with an empty list; "
            f"the old file will be kept as {store.backup_path} on the next save."
        )
        return state

    if store.skipped_lines:
        state.notices.append(
            f"Skipped {store.skipped_lines} unreadable line(s) in {store.path}."
        )
    return state
