# src/meow/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Insertion order is display order. Indices are 0-based here; the
    dispatcher converts from the 1-based numbers users type.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index {index} out of range (count={len(self._tasks)})")

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def find(self, keyword: str) -> TaskList:
        """Tasks whose description contains keyword (case-insensitive)."""
        needle = keyword.lower()
        return TaskList(t for t in self._tasks if needle in t.description.lower())

    def sort(self) -> TaskList:
        """Return a new, ordered TaskList; this list is left untouched."""
        return TaskList(sorted(self._tasks, key=Task.sort_key))

    def render(self) -> str:
        return "\n".join(f"{i}.{task}" for i, task in enumerate(self._tasks, start=1))
