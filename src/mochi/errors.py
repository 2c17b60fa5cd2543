"""Error taxonomy shared by the task model, parser, and storage codec."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class MochiError(Exception):
    """Base class for every error mochi raises on purpose."""


class ValidationError(MochiError):
    """A task could not be constructed: blank description or bad event range."""


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = "empty-input"
    UNKNOWN_COMMAND = "unknown-command"
    MISSING_FIELD = "missing-field"
    BAD_INDEX = "bad-index"
    BAD_DATE = "bad-date"
    BAD_DATETIME = "bad-datetime"
    INVALID_RANGE = "invalid-range"


class ParseError(MochiError):
    """A raw command line could not be turned into a command.

    ``kind`` tells the caller which rule was broken; callers that only need
    a "malformed command" signal can ignore it.
    """

    def __init__(self, kind: ParseErrorKind, message: str = "") -> None:
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.message!r})"


class CorruptLineError(MochiError):
    """A saved line does not follow the storage grammar."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class PersistenceError(MochiError):
    """Writing the save file failed; the in-memory list may be ahead of disk."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not save tasks to {path}: {cause}")
