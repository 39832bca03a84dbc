# src/meow/core/persona.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from ..tasks.task_models import Task

EMPTY_LIST: Final[str] = "No outstanding tasks. MEOW!"
NO_MATCH: Final[str] = "No tasks match your search. ROWR!"
UNKNOWN_COMMAND: Final[str] = "Whatchu sayin bruh?"
INVALID_DATE: Final[str] = "Invalid date format. Use yyyy-mm-dd."
INVALID_RANGE: Final[str] = "GRRR! Start date must be before end date."

LIST_HEADER: Final[str] = "Here are the tasks in your list:"
FIND_HEADER: Final[str] = "Here are the matching tasks in your list:"
SORT_HEADER: Final[str] = "Here are your tasks, sorted by date:"


def plural_tasks(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


@dataclass(frozen=True, slots=True)
class Persona:
    """The bot's voice: its name and the greeting/farewell lines."""

    name: str = "Meow"

    def welcome(self) -> str:
        return f"Hello! I'm {self.name}\nWhat can I do for you?"

    def farewell(self) -> str:
        return "Bye. Hope to see you again soon!"

    def invalid_index(self, count: int) -> str:
        return f"GRRR! Invalid task number, you only have {plural_tasks(count)}."

    def added(self, task: Task, count: int) -> str:
        return (
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {plural_tasks(count)} in the list."
        )

    def removed(self, task: Task, count: int) -> str:
        return (
            "Noted. I've removed this task:\n"
            f"  {task}\n"
            f"Now you have {plural_tasks(count)} in the list."
        )

    def marked(self, task: Task) -> str:
        return f"Nice! I've marked this task as done:\n  {task}"

    def unmarked(self, task: Task) -> str:
        return f"OK, I've marked this task as not done yet:\n  {task}"
