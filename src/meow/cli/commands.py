# src/meow/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from ..core import persona as phrases
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import StorageError, parse_iso_date

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

DEADLINE_RE = re.compile(r"^(?P<desc>.+?)\s+/by\s+(?P<by>.+)$")
EVENT_RE = re.compile(r"^(?P<desc>.+?)\s+/from\s+(?P<start>.+?)\s+/to\s+(?P<end>.+)$")


class CommandError(Exception):
    """User-facing command failure; the message is shown as the reply."""


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    help_text: str
    exact: bool


class CommandRegistry:
    """
    Keyword -> handler dispatch table.

    A line is split once into a keyword and the remaining argument text.
    Keywords are case-sensitive. Commands registered with exact=True
    accept no arguments; "list foo" is treated as unrecognized.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        exact: bool = False,
    ) -> None:
        self._commands[name] = _Command(handler=handler, help_text=help_text, exact=exact)

    def names(self) -> list[str]:
        return list(self._commands)

    def handle(self, state: AppState, line: str) -> str:
        """
        Run one input line against the state and return the reply.

        CommandError never escapes: it becomes the reply text.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return phrases.UNKNOWN_COMMAND

        name = parts[0]
        args = parts[1].strip() if len(parts) > 1 else ""

        cmd = self._commands.get(name)
        if cmd is None or (cmd.exact and args):
            logger.debug("Unrecognized input: %r", line)
            return phrases.UNKNOWN_COMMAND

        try:
            return cmd.handler(state, args)
        except CommandError as e:
            logger.debug("Command %s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, cmd in self._commands.items():
            lines.append(f"  {name} - {cmd.help_text}")
        return "\n".join(lines)


# ---- helpers ----


def _persist(state: AppState, reply: str) -> str:
    """Write-through save after a mutation; a failed save is appended to the reply."""
    try:
        state.storage.save(state.tasks)
    except StorageError as e:
        return f"{reply}\n(Warning: could not save tasks: {e})"
    return reply


def _resolve_index(state: AppState, args: str, verb: str) -> int:
    """Turn the user's 1-based number into a valid 0-based index."""
    if not args:
        raise CommandError(f"Please specify which task to {verb}. Example: {verb} 1")
    # plain ASCII digits only; int() would also take "+1", "1_0" and non-ASCII digits
    if not (args.isascii() and args.isdigit()):
        raise CommandError(state.persona.invalid_index(state.tasks.count))
    index = int(args) - 1
    if not 0 <= index < state.tasks.count:
        raise CommandError(state.persona.invalid_index(state.tasks.count))
    return index


def _parse_date(raw: str) -> date:
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise CommandError(phrases.INVALID_DATE) from None


def _render(tasks: TaskList, header: str) -> str:
    return f"{header}\n{tasks.render()}"


# ---- handlers ----


def cmd_bye(state: AppState, args: str) -> str:
    state.exit_requested = True
    return state.persona.farewell()


def cmd_list(state: AppState, args: str) -> str:
    if state.tasks.count == 0:
        return phrases.EMPTY_LIST
    return _render(state.tasks, phrases.LIST_HEADER)


def cmd_mark(state: AppState, args: str) -> str:
    task = state.tasks.get(_resolve_index(state, args, "mark"))
    task.mark()
    return _persist(state, state.persona.marked(task))


def cmd_unmark(state: AppState, args: str) -> str:
    task = state.tasks.get(_resolve_index(state, args, "unmark"))
    task.unmark()
    return _persist(state, state.persona.unmarked(task))


def _add(state: AppState, task: Task) -> str:
    state.tasks.add(task)
    logger.debug("Added task kind=%s count=%d", task.kind, state.tasks.count)
    return _persist(state, state.persona.added(task, state.tasks.count))


def cmd_todo(state: AppState, args: str) -> str:
    if not args:
        raise CommandError("Invalid todo format. Example: todo eat lunch")
    return _add(state, Task.todo(args))


def cmd_deadline(state: AppState, args: str) -> str:
    """deadline DESC /by yyyy-mm-dd"""
    m = DEADLINE_RE.match(args)
    if not m:
        raise CommandError(
            "Invalid deadline format. Example: deadline return book /by yyyy-mm-dd"
        )
    due = _parse_date(m.group("by"))
    return _add(state, Task.deadline(m.group("desc"), due))


def cmd_event(state: AppState, args: str) -> str:
    """event DESC /from yyyy-mm-dd /to yyyy-mm-dd (start strictly before end)"""
    m = EVENT_RE.match(args)
    if not m:
        raise CommandError(
            "Invalid event format. Example: event gym workout /from yyyy-mm-dd /to yyyy-mm-dd"
        )
    start = _parse_date(m.group("start"))
    end = _parse_date(m.group("end"))
    if start >= end:
        raise CommandError(phrases.INVALID_RANGE)
    return _add(state, Task.event(m.group("desc"), start, end))


def cmd_delete(state: AppState, args: str) -> str:
    removed = state.tasks.delete(_resolve_index(state, args, "delete"))
    logger.debug("Deleted task kind=%s count=%d", removed.kind, state.tasks.count)
    return _persist(state, state.persona.removed(removed, state.tasks.count))


def cmd_find(state: AppState, args: str) -> str:
    if not args:
        raise CommandError("Invalid find format. Example: find book")
    matches = state.tasks.find(args)
    if matches.count == 0:
        return phrases.NO_MATCH
    return _render(matches, phrases.FIND_HEADER)


def cmd_sort(state: AppState, args: str) -> str:
    if state.tasks.count == 0:
        return phrases.EMPTY_LIST
    return _render(state.tasks.sort(), phrases.SORT_HEADER)


def create_registry() -> CommandRegistry:
    reg = CommandRegistry()
    reg.register("list", cmd_list, "Show all tasks.", exact=True)
    reg.register("todo", cmd_todo, "Add a task: todo DESC")
    reg.register("deadline", cmd_deadline, "Add a task with a due date: deadline DESC /by yyyy-mm-dd")
    reg.register(
        "event", cmd_event, "Add an event: event DESC /from yyyy-mm-dd /to yyyy-mm-dd"
    )
    reg.register("mark", cmd_mark, "Mark task N as done: mark N")
    reg.register("unmark", cmd_unmark, "Mark task N as not done: unmark N")
    reg.register("delete", cmd_delete, "Remove task N: delete N")
    reg.register("find", cmd_find, "Search descriptions: find KEYWORD")
    reg.register("sort", cmd_sort, "Show tasks ordered by date.", exact=True)
    reg.register("help", lambda state, args: reg.build_help(), "Show available commands.", exact=True)
    reg.register("bye", cmd_bye, "Save and quit.", exact=True)
    return reg


registry = create_registry()
