"""Shared fixtures for mochi tests.

File handling in tests:
- Use tmp_path for any save file so tests are isolated and cleaned up.
- Use mochi.io_utils read_text/write_text for consistent UTF-8 I/O.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest

from mochi import log
from mochi.storage import Storage
from mochi.tasks.collection import TaskList
from mochi.tasks.model import Deadline, Event, Todo


@pytest.fixture(autouse=True)
def _quiet_log():
    """Reset verbosity so one test's -v does not leak into the next."""
    log.set_verbose(False)
    yield
    log.set_verbose(False)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv("MOCHI_DATA_DIR", raising=False)
    monkeypatch.delenv("MOCHI_FILE", raising=False)


@pytest.fixture
def save_path(tmp_path: Path) -> Path:
    """Save file path inside a not-yet-created data directory."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture
def storage(save_path: Path) -> Storage:
    return Storage(save_path)


def _sample_tasks() -> TaskList:
    tasks = TaskList()
    tasks.add(Todo("read book"))
    tasks.add(Deadline("submit report", date(2026, 1, 30), done=True))
    tasks.add(Event("sprint demo", datetime(2026, 2, 1, 9, 0), datetime(2026, 2, 1, 10, 0)))
    return tasks


@pytest.fixture
def sample_tasks() -> TaskList:
    """One task of each kind, the deadline marked done."""
    return _sample_tasks()
