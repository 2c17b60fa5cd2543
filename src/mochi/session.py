"""Apply parsed commands to the task list and build the response text.

``Session`` is the single owner of the in-memory ``TaskList`` while the
program runs. Every mutating command is persisted right away; a failed save
keeps the in-memory change and appends a warning to the response.
"""

from __future__ import annotations

from dataclasses import dataclass

from mochi import log
from mochi.errors import ParseError, PersistenceError
from mochi.parser import USAGE, Command, ParsedCommand, parse
from mochi.storage import Storage
from mochi.tasks.collection import TaskList
from mochi.tasks.model import Task

GOODBYE = "Bye-bye, please come back soon!"
WELCOME = "Hello, I'm MOCHI, your personal task tracker.\nIs there anything I can help you with today?"


@dataclass(frozen=True)
class Response:
    text: str
    exit: bool = False
    saved: bool = True


def usage_text(header: str = "Please follow the following formats:") -> str:
    return "\n".join([header, *USAGE])


def _numbered(tasks: TaskList) -> list[str]:
    return [f"{i}. {task}" for i, task in enumerate(tasks, start=1)]


def _count_line(size: int) -> str:
    return f"Currently, we have {size} task(s) on the list."


class Session:
    """Stateful command handler around one task list and its storage."""

    def __init__(self, storage: Storage, tasks: TaskList | None = None) -> None:
        self.storage = storage
        self.tasks = tasks if tasks is not None else storage.load()

    def load_status(self) -> str:
        if self.tasks.is_empty():
            return "No tasks loaded from disk."
        return f"Loaded {self.tasks.size()} task(s) from disk."

    def handle(self, line: str | None) -> Response:
        """Parse and execute one input line."""
        try:
            cmd = parse(line)
        except ParseError as exc:
            log.debug(f"Rejected command {line!r}: {exc!r}")
            return Response(usage_text("Error, please follow the specified formats:"))

        try:
            return self._dispatch(cmd)
        except IndexError:
            assert cmd.index is not None
            return Response(f"No task #{cmd.index + 1} in your list.")

    # ── dispatch ─────────────────────────────────────────────────

    def _dispatch(self, cmd: ParsedCommand) -> Response:
        match cmd.command:
            case Command.BYE:
                return Response(GOODBYE, exit=True)
            case Command.LIST:
                return Response(self._list_text())
            case Command.FIND:
                return Response(self._find_text(cmd.keyword or ""))
            case Command.TODO | Command.DEADLINE | Command.EVENT:
                assert cmd.task is not None
                return self._add(cmd.task)
            case Command.DELETE:
                assert cmd.index is not None
                removed = self.tasks.remove(cmd.index)
                return self._persist(f"Removed: {removed}\n{_count_line(self.tasks.size())}")
            case Command.MARK:
                assert cmd.index is not None
                task = self.tasks.mark(cmd.index)
                return self._persist(f"Marked as done: {task}")
            case Command.UNMARK:
                assert cmd.index is not None
                task = self.tasks.unmark(cmd.index)
                return self._persist(f"Marked as not done: {task}")
        raise AssertionError(f"unhandled command {cmd.command}")

    def _add(self, task: Task) -> Response:
        self.tasks.add(task)
        return self._persist(f"Added: {task}\n{_count_line(self.tasks.size())}")

    def _persist(self, text: str) -> Response:
        try:
            self.storage.save(self.tasks)
        except PersistenceError as exc:
            log.error(str(exc))
            return Response(
                f"{text}\nWarning: this change could not be saved ({exc.cause}).",
                saved=False,
            )
        return Response(text)

    # ── rendering ────────────────────────────────────────────────

    def _list_text(self) -> str:
        if self.tasks.is_empty():
            return "Your task list is empty."
        return "\n".join(["The following tasks are listed in the task list:", *_numbered(self.tasks)])

    def _find_text(self, keyword: str) -> str:
        matches = self.tasks.find(keyword)
        if matches.is_empty():
            return "No matching tasks found."
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches)])
