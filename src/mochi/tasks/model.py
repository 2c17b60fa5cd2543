"""Task variants (to-do, deadline, event) and their display/storage renderings.

Each variant is its own dataclass carrying only its own fields; ``Task`` is
the union of the three. Rendering dispatches on the variant with ``match``
so the display form and the storage form of a kind live side by side.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import ClassVar

from mochi.errors import ValidationError


class TaskKind(str, Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H%M"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")

# separates fields in the storage line, so descriptions may not contain it
FIELD_SEPARATOR = "|"


# ── date helpers ─────────────────────────────────────────────────────


def parse_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date. Raises ``ValueError``."""
    text = text.strip()
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"Expected YYYY-MM-DD, got {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_datetime(text: str) -> datetime:
    """Parse a strict ``YYYY-MM-DD HHMM`` date and time. Raises ``ValueError``."""
    text = text.strip()
    if not _DATETIME_RE.fullmatch(text):
        raise ValueError(f"Expected YYYY-MM-DD HHMM, got {text!r}")
    return datetime.strptime(text, DATETIME_FORMAT)


def format_date(value: date) -> str:
    # strftime does not pad years below 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_datetime(value: datetime) -> str:
    return f"{format_date(value)} {value.hour:02d}{value.minute:02d}"


def _human_date(value: date) -> str:
    return f"{value:%B} {value.day} {value.year}"


def _human_datetime(value: datetime) -> str:
    return f"{_human_date(value)} {value:%H:%M}"


# ── variants ─────────────────────────────────────────────────────────


def _clean_description(description: str | None) -> str:
    if description is None or not str(description).strip():
        raise ValidationError("Task description cannot be blank")
    if FIELD_SEPARATOR in str(description):
        raise ValidationError(f"Task description cannot contain {FIELD_SEPARATOR!r}")
    return str(description).strip()


@dataclass
class _TaskBase:
    description: str
    done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        self.description = _clean_description(self.description)

    def mark(self) -> None:
        self.done = True

    def unmark(self) -> None:
        self.done = False

    def matches_keyword(self, keyword: str | None) -> bool:
        """Case-insensitive substring match against the description only."""
        if keyword is None or not keyword.strip():
            return False
        return keyword.strip().lower() in self.description.lower()

    def __str__(self) -> str:
        return render_display(self)  # type: ignore[arg-type]


@dataclass
class Todo(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass
class Deadline(_TaskBase):
    by: date

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.by, datetime):
            self.by = self.by.date()


@dataclass
class Event(_TaskBase):
    """A timed event; ``end`` must be strictly after ``start``."""

    start: datetime
    end: datetime

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        super().__post_init__()
        # storage keeps minutes only
        self.start = self.start.replace(second=0, microsecond=0)
        self.end = self.end.replace(second=0, microsecond=0)
        if self.end <= self.start:
            raise ValidationError(
                f"Event end ({format_datetime(self.end)}) must be after "
                f"start ({format_datetime(self.start)})"
            )


Task = Todo | Deadline | Event


def create_task(kind: TaskKind | str, description: str | None, *extras: object) -> Task:
    """Build a task of ``kind`` from its description and kind-specific fields.

    Deadline takes one ``date``; Event takes ``start`` and ``end`` datetimes.
    Raises ``ValidationError`` when the fields do not fit the kind.
    """
    try:
        kind = TaskKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown task kind: {kind!r}") from None

    match kind:
        case TaskKind.TODO:
            if extras:
                raise ValidationError("A to-do takes no extra fields")
            return Todo(description)  # type: ignore[arg-type]
        case TaskKind.DEADLINE:
            if len(extras) != 1 or not isinstance(extras[0], date):
                raise ValidationError("A deadline needs exactly one date")
            return Deadline(description, extras[0])  # type: ignore[arg-type]
        case TaskKind.EVENT:
            if len(extras) != 2 or not all(isinstance(e, datetime) for e in extras):
                raise ValidationError("An event needs a start and an end datetime")
            return Event(description, extras[0], extras[1])  # type: ignore[arg-type]


# ── rendering ────────────────────────────────────────────────────────


def render_display(task: Task) -> str:
    """Human-readable form, e.g. ``[D][X] submit report (by: January 30 2026)``."""
    head = f"[{task.kind.value}][{'X' if task.done else ' '}] {task.description}"
    match task:
        case Deadline(by=by):
            return f"{head} (by: {_human_date(by)})"
        case Event(start=start, end=end):
            return f"{head} (from: {_human_datetime(start)} to: {_human_datetime(end)})"
        case _:
            return head


def render_storage(task: Task) -> str:
    """On-disk form, e.g. ``D | 1 | submit report | 2026-01-30``."""
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    match task:
        case Deadline(by=by):
            fields.append(format_date(by))
        case Event(start=start, end=end):
            fields.extend([format_datetime(start), format_datetime(end)])
    return f" {FIELD_SEPARATOR} ".join(fields)
