# src/meow/core/ports.py

"""
Ports (interfaces) used by the core.

The dispatcher depends on Protocols instead of concrete implementations,
so the flat-file store can be swapped for an in-memory fake in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: load everything at startup, rewrite on every change."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
