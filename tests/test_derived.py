# tests/test_derived.py

from __future__ import annotations

import itertools
from types import SimpleNamespace

import pytest

from taskboard.api.models import Priority, Task, TaskStatus
from taskboard.core.derived import ALL, TaskFilter, compute_stats, filter_by_status, filter_tasks


def _grid() -> list[Task]:
    """One task for every status/priority pair, plus a duplicate to make counts uneven."""
    tasks = [
        Task(title=f"{s}-{p}", status=s, priority=p, id=i)
        for i, (s, p) in enumerate(itertools.product(TaskStatus, Priority), start=1)
    ]
    tasks.append(Task(title="extra", status=TaskStatus.DONE, priority=Priority.HIGH, id=99))
    return tasks


def test_empty_filter_keeps_everything_in_order() -> None:
    tasks = _grid()
    assert TaskFilter().is_empty
    assert filter_tasks(tasks, TaskFilter()) == tasks


@pytest.mark.parametrize("status", [None, *TaskStatus])
@pytest.mark.parametrize("priority", [None, *Priority])
def test_filter_keeps_exactly_the_matching_tasks(status: TaskStatus | None, priority: Priority | None) -> None:
    tasks = _grid()
    task_filter = TaskFilter(status=status, priority=priority)

    kept = filter_tasks(tasks, task_filter)

    for t in tasks:
        wanted = (status is None or t.status == status) and (priority is None or t.priority == priority)
        assert (t in kept) == wanted
    assert kept == [t for t in tasks if t in kept]


def test_stats_partition_the_collection() -> None:
    stats = compute_stats(_grid())

    assert stats.total == 10
    assert stats.todo + stats.in_progress + stats.done == stats.total
    assert stats.low + stats.medium + stats.high == stats.total
    assert (stats.todo, stats.in_progress, stats.done) == (3, 3, 4)
    assert (stats.low, stats.medium, stats.high) == (3, 3, 4)


def test_stats_ignore_the_active_filter() -> None:
    tasks = _grid()
    filter_tasks(tasks, TaskFilter(status=TaskStatus.DONE))
    assert compute_stats(tasks).total == len(tasks)


def test_stats_of_nothing_are_zero() -> None:
    stats = compute_stats([])
    assert stats.total == stats.todo == stats.high == 0


def test_filter_by_status_for_generic_items() -> None:
    items = [SimpleNamespace(status="ACTIVE", n=1), SimpleNamespace(status="PENDING", n=2), SimpleNamespace(n=3)]

    assert filter_by_status(items, ALL) == items
    assert filter_by_status(items, None) == items
    assert [i.n for i in filter_by_status(items, "PENDING")] == [2]
    assert filter_by_status(items, "COMPLETED") == []
