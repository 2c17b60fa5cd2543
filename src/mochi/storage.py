"""Load and save the task list as a pipe-delimited text file.

One task per line::

    T | <0|1> | <description>
    D | <0|1> | <description> | <YYYY-MM-DD>
    E | <0|1> | <description> | <YYYY-MM-DD HHMM> | <YYYY-MM-DD HHMM>

Loading is best-effort: corrupt lines are skipped and an unreadable file
yields an empty list. Saving rewrites the whole file and raises
``PersistenceError`` on failure.
"""

from __future__ import annotations

import re
from pathlib import Path

from mochi import log
from mochi.errors import CorruptLineError, PersistenceError, ValidationError
from mochi.io_utils import PathLike, read_lines, write_lines
from mochi.tasks.collection import TaskList
from mochi.tasks.model import (
    Deadline,
    Event,
    Task,
    TaskKind,
    Todo,
    parse_date,
    parse_datetime,
    render_storage,
)

PIPE_SPLIT_RE = re.compile(r"\s*\|\s*")


def parse_line(line: str) -> Task:
    """Decode one saved line. Raises ``CorruptLineError`` on any violation."""
    parts = PIPE_SPLIT_RE.split(line.strip())
    if len(parts) < 3:
        raise CorruptLineError(line, "too few fields")

    code, done_flag, description = parts[0].upper(), parts[1], parts[2]
    try:
        kind = TaskKind(code)
    except ValueError:
        raise CorruptLineError(line, f"unknown kind code {parts[0]!r}") from None
    if done_flag not in ("0", "1"):
        raise CorruptLineError(line, f"bad done flag {done_flag!r}")

    try:
        match kind:
            case TaskKind.TODO:
                task: Task = Todo(description)
            case TaskKind.DEADLINE:
                if len(parts) < 4:
                    raise CorruptLineError(line, "deadline missing date")
                task = Deadline(description, parse_date(parts[3]))
            case TaskKind.EVENT:
                if len(parts) < 5:
                    raise CorruptLineError(line, "event missing from/to")
                task = Event(description, parse_datetime(parts[3]), parse_datetime(parts[4]))
    except ValidationError as exc:
        raise CorruptLineError(line, str(exc)) from exc
    except ValueError as exc:
        raise CorruptLineError(line, f"bad date/time: {exc}") from exc

    if done_flag == "1":
        task.mark()
    return task


class Storage:
    """Reads and writes the task list at a fixed path."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)

    def load(self) -> TaskList:
        """Return the saved tasks; never raises."""
        tasks = TaskList()
        try:
            if not self.path.is_file():
                log.debug(f"No save file at {self.path}; starting empty")
                return tasks
            lines = read_lines(self.path)
        except (OSError, UnicodeDecodeError) as exc:
            log.warn(f"Could not read {self.path} ({exc}); starting with an empty task list")
            return TaskList()

        skipped = 0
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.add(parse_line(line))
            except CorruptLineError as exc:
                skipped += 1
                log.debug(f"Skipping corrupted line {lineno} in {self.path}: {exc.reason}")
        if skipped:
            log.warn(f"Skipped {skipped} corrupted line(s) in {self.path}")
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Rewrite the save file with one line per task, in order."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_lines(self.path, [render_storage(t) for t in tasks])
        except OSError as exc:
            raise PersistenceError(self.path, exc) from exc
        log.debug(f"Saved {tasks.size()} task(s) to {self.path}")


def load(path: PathLike) -> TaskList:
    return Storage(path).load()


def save(path: PathLike, tasks: TaskList) -> None:
    Storage(path).save(tasks)
