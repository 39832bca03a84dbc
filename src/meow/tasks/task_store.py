# src/meow/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

SEP = " | "
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# number of fields per line, description always last
_FIELD_COUNT: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


class StorageError(Exception):
    """Task file could not be read or written."""


def parse_iso_date(raw: str) -> date:
    """
    Strict yyyy-mm-dd parser.

    date.fromisoformat alone also accepts forms like 20240101, so the
    shape is checked first. Raises ValueError.
    """
    s = raw.strip()
    if not DATE_RE.fullmatch(s):
        raise ValueError(f"not a yyyy-mm-dd date: {raw!r}")
    return date.fromisoformat(s)


def encode_task(task: Task) -> str:
    fields = [task.kind.value, "1" if task.done else "0"]
    if task.kind is TaskKind.DEADLINE:
        fields.append(task.due.isoformat())  # type: ignore[union-attr]
    elif task.kind is TaskKind.EVENT:
        fields.append(task.start.isoformat())  # type: ignore[union-attr]
        fields.append(task.end.isoformat())  # type: ignore[union-attr]
    fields.append(task.description)
    return SEP.join(fields)


def decode_task(line: str) -> Task:
    """Parse one stored line. Raises ValueError on anything malformed."""
    head = line.split(SEP, 1)[0]
    try:
        kind = TaskKind(head)
    except ValueError:
        raise ValueError(f"unknown task kind {head!r}") from None

    n = _FIELD_COUNT[kind]
    parts = line.split(SEP, n - 1)
    if len(parts) != n:
        raise ValueError(f"expected {n} fields, got {len(parts)}")

    done_raw = parts[1]
    if done_raw not in ("0", "1"):
        raise ValueError(f"bad done flag {done_raw!r}")
    done = done_raw == "1"

    description = parts[-1]
    if kind is TaskKind.TODO:
        task = Task.todo(description)
    elif kind is TaskKind.DEADLINE:
        task = Task.deadline(description, parse_iso_date(parts[2]))
    else:
        task = Task.event(description, parse_iso_date(parts[2]), parse_iso_date(parts[3]))

    task.done = done
    return task


class TaskStore:
    """
    Flat-file task store.

    One task per line (UTF-8), fields joined by " | ":
      T | 0 | read book
      D | 1 | 2024-01-01 | return book
      E | 0 | 2024-02-01 | 2024-02-10 | trip
    The description is the last field, so it may itself contain the separator.

    save() always rewrites the whole file (temp file + os.replace). If the
    last load() could not read the file, the first save() moves it aside to
    "<name>.bak" instead of overwriting it.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self.skipped_lines = 0
        self._keep_unreadable = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_suffix(self._path.suffix + ".bak")

    def load(self) -> list[Task]:
        """
        Read all tasks. A missing file is an empty list.

        Lines are split on "\\n" only and decoded one at a time, so a corrupt
        or non-UTF-8 line is skipped (and counted in skipped_lines) without
        losing the rest. An unreadable file raises StorageError.
        """
        self.skipped_lines = 0
        self._keep_unreadable = False
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            data = self._path.read_bytes()
        except OSError as e:
            self._keep_unreadable = True
            raise StorageError(f"cannot read {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, raw in enumerate(data.split(b"\n"), start=1):
            try:
                line = raw.decode("utf-8").removesuffix("\r")
            except UnicodeDecodeError as e:
                self.skipped_lines += 1
                logger.warning("Skipping undecodable line %d in %s: %s", lineno, self._path, e)
                continue
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except ValueError as e:
                self.skipped_lines += 1
                logger.warning("Skipping corrupt line %d in %s: %s", lineno, self._path, e)

        logger.info(
            "Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, self.skipped_lines
        )
        return tasks

    def _set_aside_unreadable(self) -> None:
        if not self._keep_unreadable:
            return
        if self._path.exists():
            try:
                os.replace(self._path, self.backup_path)
            except OSError as e:
                raise StorageError(
                    f"refusing to overwrite unreadable {self._path} (backup failed: {e})"
                ) from e
            logger.warning("Moved unreadable task file %s to %s", self._path, self.backup_path)
        self._keep_unreadable = False

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) for t in tasks]
        payload = "".join(line + "\n" for line in lines)
        self._set_aside_unreadable()
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"cannot write {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
