"""Turn one raw input line into a ``ParsedCommand``.

Grammar (verb is case-insensitive, indices are 1-based)::

    list | bye
    mark <n> | unmark <n> | delete <n>
    todo <description>
    deadline <description> /by <YYYY-MM-DD>
    event <description> /from <YYYY-MM-DD HHMM> /to <YYYY-MM-DD HHMM>
    find <keyword>

Only the first ``/by``, ``/from`` or ``/to`` splits the text; later
occurrences stay part of the surrounding segment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from mochi.errors import ParseError, ParseErrorKind, ValidationError
from mochi.tasks.model import Deadline, Event, Task, Todo, parse_date, parse_datetime


class Command(str, Enum):
    LIST = "list"
    BYE = "bye"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"


@dataclass(frozen=True)
class ParsedCommand:
    """A command plus at most one payload.

    ``index`` (0-based) is set for MARK/UNMARK/DELETE, ``task`` for
    TODO/DEADLINE/EVENT, ``keyword`` for FIND; everything else is ``None``.
    """

    command: Command
    index: int | None = None
    task: Task | None = None
    keyword: str | None = None


USAGE: tuple[str, ...] = (
    "todo <task>",
    "deadline <task> /by yyyy-MM-dd",
    "event <task> /from yyyy-MM-dd HHmm /to yyyy-MM-dd HHmm",
    "mark <number>",
    "unmark <number>",
    "delete <number>",
    "find <keyword>",
    "list",
    "bye",
)

_BY_RE = re.compile(r"\s*/by\s*")
_FROM_RE = re.compile(r"\s*/from\s*")
_TO_RE = re.compile(r"\s*/to\s*")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse(raw_line: str | None) -> ParsedCommand:
    """Parse ``raw_line`` or raise ``ParseError`` naming the broken rule."""
    if raw_line is None or not raw_line.strip():
        raise ParseError(ParseErrorKind.EMPTY_INPUT, "Input is empty")

    line = raw_line.strip()
    verb_token = line.split(maxsplit=1)[0]
    rest = line[len(verb_token):].strip()

    match verb_token.lower():
        case "list":
            return ParsedCommand(Command.LIST)
        case "bye":
            return ParsedCommand(Command.BYE)
        case "mark":
            return ParsedCommand(Command.MARK, index=_parse_index(rest))
        case "unmark":
            return ParsedCommand(Command.UNMARK, index=_parse_index(rest))
        case "delete":
            return ParsedCommand(Command.DELETE, index=_parse_index(rest))
        case "todo":
            return ParsedCommand(Command.TODO, task=_parse_todo(rest))
        case "deadline":
            return ParsedCommand(Command.DEADLINE, task=_parse_deadline(rest))
        case "event":
            return ParsedCommand(Command.EVENT, task=_parse_event(rest))
        case "find":
            if not rest:
                raise ParseError(ParseErrorKind.MISSING_FIELD, "Find keyword missing")
            return ParsedCommand(Command.FIND, keyword=rest)
        case _:
            raise ParseError(ParseErrorKind.UNKNOWN_COMMAND, f"Unknown command: {verb_token}")


def _parse_index(rest: str) -> int:
    """Convert the single 1-based argument to a 0-based index."""
    parts = rest.split()
    if len(parts) != 1:
        raise ParseError(ParseErrorKind.BAD_INDEX, "Expected exactly one task number")
    if not _INT_RE.fullmatch(parts[0]):
        raise ParseError(ParseErrorKind.BAD_INDEX, f"Task number must be a number: {parts[0]}")
    one_based = int(parts[0])
    if one_based <= 0:
        raise ParseError(ParseErrorKind.BAD_INDEX, "Task number must be >= 1")
    return one_based - 1


def _parse_todo(rest: str) -> Task:
    if not rest:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Todo description missing")
    return _build(Todo, rest)


def _parse_deadline(rest: str) -> Task:
    parts = _BY_RE.split(rest, maxsplit=1)
    if len(parts) < 2:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Missing /by")
    description, by_raw = parts[0].strip(), parts[1].strip()
    if not description or not by_raw:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Deadline description/date missing")
    try:
        by = parse_date(by_raw)
    except ValueError:
        raise ParseError(ParseErrorKind.BAD_DATE, "Deadline date must be yyyy-MM-dd") from None
    return _build(Deadline, description, by)


def _parse_event(rest: str) -> Task:
    first = _FROM_RE.split(rest, maxsplit=1)
    if len(first) < 2:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Missing /from")
    second = _TO_RE.split(first[1], maxsplit=1)
    if len(second) < 2:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Missing /to")

    description, from_raw, to_raw = first[0].strip(), second[0].strip(), second[1].strip()
    if not description or not from_raw or not to_raw:
        raise ParseError(ParseErrorKind.MISSING_FIELD, "Event description/from/to missing")

    try:
        start = parse_datetime(from_raw)
        end = parse_datetime(to_raw)
    except ValueError:
        raise ParseError(
            ParseErrorKind.BAD_DATETIME,
            "Event date/time must be yyyy-MM-dd HHmm (e.g. 2026-01-30 1800)",
        ) from None
    if end <= start:
        raise ParseError(ParseErrorKind.INVALID_RANGE, "/to must be after /from")
    return _build(Event, description, start, end)


def _build(factory: type[Task], description: str, *extras: object) -> Task:
    """Construct a task, reporting an unusable description as a missing field."""
    try:
        return factory(description, *extras)  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ParseError(ParseErrorKind.MISSING_FIELD, str(exc)) from None
