# src/meow/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

DISPLAY_DATE_FORMAT = "%b %d %Y"


class TaskKind(StrEnum):
    """
    Task variant tag.

    Values double as the one-letter type marker shown to the user
    and written to the task file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Kind-specific fields:
    - DEADLINE: due
    - EVENT: start, end (start < end)
    Fields that do not belong to the kind must stay None.
    """

    kind: TaskKind
    description: str
    done: bool = False

    due: date | None = None
    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        self.description = self.description.strip()
        if not self.description:
            raise ValueError("description is required")
        if "\n" in self.description or "\r" in self.description:
            raise ValueError("description must be a single line")

        if self.kind is TaskKind.TODO:
            if self.due is not None or self.start is not None or self.end is not None:
                raise ValueError("todo tasks carry no dates")
        elif self.kind is TaskKind.DEADLINE:
            if self.due is None:
                raise ValueError("deadline tasks require a due date")
            if self.start is not None or self.end is not None:
                raise ValueError("deadline tasks carry only a due date")
        elif self.kind is TaskKind.EVENT:
            if self.start is None or self.end is None:
                raise ValueError("event tasks require start and end dates")
            if self.due is not None:
                raise ValueError("event tasks carry no due date")
            if self.start >= self.end:
                raise ValueError("event start must be before end")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(kind=TaskKind.TODO, description=description)

    @classmethod
    def deadline(cls, description: str, due: date) -> Task:
        return cls(kind=TaskKind.DEADLINE, description=description, due=due)

    @classmethod
    def event(cls, description: str, start: date, end: date) -> Task:
        return cls(kind=TaskKind.EVENT, description=description, start=start, end=end)

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    @property
    def relevant_date(self) -> date | None:
        """Date used for ordering: due date for deadlines, start date for events."""
        if self.kind is TaskKind.DEADLINE:
            return self.due
        if self.kind is TaskKind.EVENT:
            return self.start
        return None

    def sort_key(self) -> tuple[bool, date, str]:
        # undated first, then earliest date, then description
        d = self.relevant_date
        return (d is not None, d or date.min, self.description.lower())

    def __str__(self) -> str:
        status = "X" if self.done else " "
        text = f"[{self.kind.value}][{status}] {self.description}"
        if self.kind is TaskKind.DEADLINE and self.due is not None:
            text += f" (by: {_fmt(self.due)})"
        elif self.kind is TaskKind.EVENT and self.start is not None and self.end is not None:
            text += f" (from: {_fmt(self.start)} to: {_fmt(self.end)})"
        return text


def _fmt(d: date) -> str:
    return d.strftime(DISPLAY_DATE_FORMAT)
