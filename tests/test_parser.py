"""Tests for mochi.parser — command grammar and error kinds."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from mochi.errors import ParseError, ParseErrorKind
from mochi.parser import Command, parse
from mochi.tasks.model import Deadline, Event, Todo, render_storage


def _kind(line: str | None) -> ParseErrorKind:
    with pytest.raises(ParseError) as info:
        parse(line)
    return info.value.kind


# ── Simple verbs ─────────────────────────────────────────────────────


class TestSimpleCommands:

    @pytest.mark.parametrize("line,command", [("list", Command.LIST), ("bye", Command.BYE)])
    def test_no_payload(self, line, command):
        cmd = parse(line)
        assert cmd.command is command
        assert cmd.index is None
        assert cmd.task is None
        assert cmd.keyword is None

    def test_verb_is_case_insensitive(self):
        assert parse("  LiSt  ").command is Command.LIST

    @pytest.mark.parametrize("line", [None, "", "   ", "\t"])
    def test_empty_input(self, line):
        assert _kind(line) is ParseErrorKind.EMPTY_INPUT

    @pytest.mark.parametrize("line", ["hello", "lists", "todos read", "remove 1"])
    def test_unknown_command(self, line):
        assert _kind(line) is ParseErrorKind.UNKNOWN_COMMAND


# ── Index commands ───────────────────────────────────────────────────


class TestIndexCommands:

    @pytest.mark.parametrize(
        "line,command",
        [("mark 2", Command.MARK), ("unmark 2", Command.UNMARK), ("delete 2", Command.DELETE)],
    )
    def test_one_based_to_zero_based(self, line, command):
        cmd = parse(line)
        assert cmd.command is command
        assert cmd.index == 1
        assert cmd.task is None
        assert cmd.keyword is None

    def test_first_task(self):
        assert parse("mark 1").index == 0

    @pytest.mark.parametrize(
        "line", ["mark 0", "mark -1", "mark", "mark two", "mark 1 2", "delete 1.5", "unmark 1_000"]
    )
    def test_bad_index(self, line):
        assert _kind(line) is ParseErrorKind.BAD_INDEX


# ── Todo ─────────────────────────────────────────────────────────────


class TestTodo:

    def test_todo(self):
        cmd = parse("todo read book")
        assert cmd.command is Command.TODO
        assert isinstance(cmd.task, Todo)
        assert str(cmd.task) == "[T][ ] read book"
        assert cmd.index is None
        assert cmd.keyword is None

    def test_upper_case_verb_keeps_description(self):
        assert parse("TODO Read Book").task.description == "Read Book"

    def test_extra_whitespace_trimmed(self):
        assert parse("todo    read   book  ").task.description == "read   book"

    @pytest.mark.parametrize("line", ["todo", "todo    "])
    def test_missing_description(self, line):
        assert _kind(line) is ParseErrorKind.MISSING_FIELD

    def test_field_separator_in_description(self):
        with pytest.raises(ParseError) as info:
            parse("todo pay rent | utilities")
        assert info.value.kind is ParseErrorKind.MISSING_FIELD
        assert "cannot contain" in info.value.message

    @pytest.mark.parametrize(
        "line",
        [
            "deadline rent | bills /by 2026-01-30",
            "event a | b /from 2026-02-01 0900 /to 2026-02-01 1000",
        ],
    )
    def test_field_separator_in_dated_description(self, line):
        assert _kind(line) is ParseErrorKind.MISSING_FIELD


# ── Deadline ─────────────────────────────────────────────────────────


class TestDeadline:

    def test_deadline(self):
        cmd = parse("deadline submit report /by 2026-01-30")
        assert cmd.command is Command.DEADLINE
        assert isinstance(cmd.task, Deadline)
        assert cmd.task.by == date(2026, 1, 30)
        assert render_storage(cmd.task) == "D | 0 | submit report | 2026-01-30"

    def test_delimiter_whitespace_tolerant(self):
        cmd = parse("deadline submit report/by2026-01-30")
        assert cmd.task.description == "submit report"
        assert cmd.task.by == date(2026, 1, 30)

    def test_only_first_by_splits(self):
        with pytest.raises(ParseError) as info:
            parse("deadline a /by 2026-01-30 /by 2026-02-01")
        assert info.value.kind is ParseErrorKind.BAD_DATE

    @pytest.mark.parametrize(
        "line",
        ["deadline", "deadline submit report", "deadline /by 2026-01-30", "deadline submit /by   "],
    )
    def test_missing_field(self, line):
        assert _kind(line) is ParseErrorKind.MISSING_FIELD

    @pytest.mark.parametrize("when", ["tomorrow", "2026-13-01", "30/01/2026", "2026-01-30 1800"])
    def test_bad_date(self, when):
        assert _kind(f"deadline submit /by {when}") is ParseErrorKind.BAD_DATE


# ── Event ────────────────────────────────────────────────────────────


class TestEvent:

    def test_event(self):
        cmd = parse("event sprint demo /from 2026-02-01 0900 /to 2026-02-01 1000")
        assert cmd.command is Command.EVENT
        assert isinstance(cmd.task, Event)
        assert cmd.task.description == "sprint demo"
        assert cmd.task.start == datetime(2026, 2, 1, 9, 0)
        assert cmd.task.end == datetime(2026, 2, 1, 10, 0)

    def test_spanning_days(self):
        cmd = parse("event trip /from 2026-02-01 2200 /to 2026-02-03 0600")
        assert cmd.task.end == datetime(2026, 2, 3, 6, 0)

    def test_later_to_stays_in_to_segment(self):
        assert _kind("event a /from 2026-02-01 0900 /to 2026-02-01 1000 /to x") is ParseErrorKind.BAD_DATETIME

    @pytest.mark.parametrize(
        "line",
        [
            "event",
            "event demo",
            "event demo /from 2026-02-01 0900",
            "event demo /to 2026-02-01 1000",
            "event /from 2026-02-01 0900 /to 2026-02-01 1000",
            "event demo /from /to 2026-02-01 1000",
            "event demo /from 2026-02-01 0900 /to   ",
        ],
    )
    def test_missing_field(self, line):
        assert _kind(line) is ParseErrorKind.MISSING_FIELD

    @pytest.mark.parametrize(
        "line",
        [
            "event demo /from 2026-02-01 /to 2026-02-01 1000",
            "event demo /from 2026-02-01 09:00 /to 2026-02-01 10:00",
            "event demo /from 2026-02-01 0900 /to soon",
        ],
    )
    def test_bad_datetime(self, line):
        assert _kind(line) is ParseErrorKind.BAD_DATETIME

    @pytest.mark.parametrize(
        "line",
        [
            "event demo /from 2026-02-01 0900 /to 2026-02-01 0900",
            "event demo /from 2026-02-01 0900 /to 2026-02-01 0859",
            "event demo /from 2026-02-02 0100 /to 2026-02-01 2300",
        ],
    )
    def test_invalid_range(self, line):
        assert _kind(line) is ParseErrorKind.INVALID_RANGE


# ── Find ─────────────────────────────────────────────────────────────


class TestFind:

    def test_find(self):
        cmd = parse("find  Book Club ")
        assert cmd.command is Command.FIND
        assert cmd.keyword == "Book Club"
        assert cmd.index is None
        assert cmd.task is None

    def test_missing_keyword(self):
        assert _kind("find   ") is ParseErrorKind.MISSING_FIELD


class TestParseErrorShape:

    def test_message_and_repr(self):
        with pytest.raises(ParseError) as info:
            parse("mark zero")
        assert info.value.kind is ParseErrorKind.BAD_INDEX
        assert "number" in str(info.value)
        assert "BAD_INDEX" in repr(info.value)
