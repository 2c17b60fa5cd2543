"""Task variants and the ordered task list that owns them."""

from mochi.tasks.collection import TaskList
from mochi.tasks.model import Deadline, Event, Task, TaskKind, Todo, create_task

__all__ = ["Deadline", "Event", "Task", "TaskKind", "TaskList", "Todo", "create_task"]
