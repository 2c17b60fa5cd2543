"""Ordered task list: insertion order is display and storage order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mochi.tasks.model import Task


class TaskList:
    """Owns an ordered sequence of tasks addressed by 0-based index.

    The list never reorders or deduplicates. Out-of-range indices raise
    ``IndexError``; negative indices are out of range rather than counted
    from the end.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    # ── mutation ─────────────────────────────────────────────────

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark()
        return task

    # ── queries ──────────────────────────────────────────────────

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def find(self, keyword: str | None) -> TaskList:
        """Return a new list of tasks whose description contains ``keyword``."""
        if keyword is None or not keyword.strip():
            return TaskList()
        return TaskList(t for t in self._tasks if t.matches_keyword(keyword))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(
                f"Task index {index} out of range for {len(self._tasks)} task(s)"
            )

    # ── container protocol ───────────────────────────────────────

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __contains__(self, task: object) -> bool:
        return any(t is task for t in self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
