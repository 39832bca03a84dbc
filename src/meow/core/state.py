# src/meow/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .persona import Persona
from .ports import TaskRepo


@dataclass
class AppState:
    """
    Everything a command handler may touch.

    Built once by cli.bootstrap and passed explicitly to the dispatcher
    and the console loop; nothing here is a module-level singleton.
    """

    settings: Any
    tasks: TaskList
    storage: TaskRepo
    persona: Persona = field(default_factory=Persona)

    # Set by the "bye" command; connectors stop reading input once it is True.
    exit_requested: bool = False

    # Messages to show the user once at startup (e.g. skipped corrupt lines).
    notices: list[str] = field(default_factory=list)
