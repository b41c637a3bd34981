# src/taskboard/core/derived.py

"""
Pure functions over the in-memory collections.

Nothing here is cached or sent to the server; views call these on every read
so the numbers always match the current collections and filter.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from ..api.models import Priority, Task, TaskStats, TaskStatus

ALL = "ALL"

E = TypeVar("E")


@dataclass(slots=True, frozen=True)
class TaskFilter:
    """Empty (None) fields do not constrain."""

    status: TaskStatus | None = None
    priority: Priority | None = None

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.priority is None


def matches(task: Task, task_filter: TaskFilter) -> bool:
    if task_filter.status is not None and task.status != task_filter.status:
        return False
    if task_filter.priority is not None and task.priority != task_filter.priority:
        return False
    return True


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter) -> list[Task]:
    return [t for t in tasks if matches(t, task_filter)]


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    def count(**kw: Any) -> int:
        return len(filter_tasks(tasks, TaskFilter(**kw)))

    return TaskStats(
        total=len(tasks),
        todo=count(status=TaskStatus.TODO),
        in_progress=count(status=TaskStatus.IN_PROGRESS),
        done=count(status=TaskStatus.DONE),
        low=count(priority=Priority.LOW),
        medium=count(priority=Priority.MEDIUM),
        high=count(priority=Priority.HIGH),
    )


def filter_by_status(items: Iterable[E], status: Any) -> list[E]:
    """Status-equality filter used by the generic CRUD board; "ALL" keeps everything."""
    if status is None or status == ALL:
        return list(items)
    return [item for item in items if getattr(item, "status", None) == status]
