# src/taskboard/core/board.py

"""
Task board orchestration.

This module is front-end agnostic:
- front ends (console REPL, tests) call load() and the action methods,
- the board talks to the REST layer only through the ports in core/ports.py,
- derived values (filtered view, stats) are computed on read, never stored.

Key invariants:
- the initial load issues the three collection requests together and commits
  nothing unless all three succeed,
- after every successful mutation the affected collections are re-fetched in
  full; nothing is patched locally,
- overlapping actions are not sequenced: whichever reload finishes last wins.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from ..api.errors import ApiError, describe_error
from ..api.models import Priority, Project, Task, TaskStats, TaskStatus, User
from .derived import TaskFilter, compute_stats, filter_tasks
from .ports import ProjectRepo, TaskRepo, UserRepo
from .state import BoardState, ViewMode

logger = logging.getLogger(__name__)

# REST-layer failures plus malformed payloads.
_API_FAILURES = (ApiError, ValueError)


class TaskBoard:
    def __init__(
        self,
        *,
        tasks: TaskRepo,
        users: UserRepo,
        projects: ProjectRepo,
        base_url: str = "",
    ) -> None:
        self._tasks = tasks
        self._users = users
        self._projects = projects
        self._base_url = base_url
        self.state = BoardState()

    # ---- derived ----

    @property
    def mode(self) -> ViewMode:
        return self.state.mode

    @property
    def error(self) -> str | None:
        return self.state.error

    @property
    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self.state.tasks, self.state.task_filter)

    @property
    def stats(self) -> TaskStats:
        return compute_stats(self.state.tasks)

    def set_filter(
        self,
        status: TaskStatus | str | None = None,
        priority: Priority | str | None = None,
    ) -> TaskFilter:
        """Empty string or None clears that constraint."""
        self.state.task_filter = TaskFilter(
            status=TaskStatus.parse(status) if status else None,
            priority=Priority.parse(priority) if priority else None,
        )
        return self.state.task_filter

    # ---- loading ----

    def _load_failure_message(self) -> str:
        where = self._base_url or "the configured API URL"
        return f"Failed to load data. Make sure the backend is running at {where}."

    async def load(self) -> bool:
        """Fetch tasks, users and projects concurrently; all or nothing."""
        self.state.mode = ViewMode.LOADING
        try:
            tasks, users, projects = await asyncio.gather(
                self._tasks.get_all(),
                self._users.get_all(),
                self._projects.get_all(),
            )
        except _API_FAILURES as e:
            logger.warning("Initial load failed: %s", describe_error(e))
            self.state.clear_collections()
            self.state.error = self._load_failure_message()
            self.state.mode = ViewMode.ERROR
            return False

        self.state.tasks = list(tasks)
        self.state.users = list(users)
        self.state.projects = list(projects)
        self.state.error = None
        self.state.mode = ViewMode.LOADED
        logger.info(
            "Board loaded: %d tasks, %d users, %d projects",
            len(self.state.tasks),
            len(self.state.users),
            len(self.state.projects),
        )
        return True

    async def reload_tasks(self) -> bool:
        try:
            tasks = await self._tasks.get_all()
        except _API_FAILURES as e:
            logger.warning("Task reload failed: %s", describe_error(e))
            self.state.tasks = []
            self.state.error = self._load_failure_message()
            self.state.mode = ViewMode.ERROR
            return False

        self.state.tasks = list(tasks)
        self.state.error = None
        self.state.mode = ViewMode.LOADED
        return True

    # ---- actions ----

    async def _mutate(self, failure_message: str, call: Awaitable[object], *, full_reload: bool) -> bool:
        try:
            await call
        except _API_FAILURES as e:
            logger.warning("%s: %s", failure_message, describe_error(e))
            self.state.error = failure_message
            return False

        if full_reload:
            await self.load()
        else:
            await self.reload_tasks()
        return True

    async def create_task(self, task: Task) -> bool:
        if not (task.title or "").strip():
            raise ValueError("title is required")
        return await self._mutate("Failed to create task", self._tasks.create(task), full_reload=False)

    async def update_task(self, task_id: int, task: Task) -> bool:
        if not (task.title or "").strip():
            raise ValueError("title is required")
        return await self._mutate("Failed to update task", self._tasks.update(task_id, task), full_reload=False)

    async def change_status(self, task_id: int, status: TaskStatus | str) -> bool:
        status = TaskStatus.parse(status)
        return await self._mutate(
            "Failed to update task status",
            self._tasks.update_status(task_id, status),
            full_reload=False,
        )

    async def delete_task(self, task_id: int) -> bool:
        return await self._mutate("Failed to delete task", self._tasks.delete(task_id), full_reload=False)

    async def create_user(self, user: User) -> bool:
        if not (user.name or "").strip():
            raise ValueError("name is required")
        if not (user.email or "").strip():
            raise ValueError("email is required")
        return await self._mutate("Failed to create user", self._users.create(user), full_reload=True)

    async def create_project(self, project: Project) -> bool:
        if not (project.name or "").strip():
            raise ValueError("name is required")
        return await self._mutate("Failed to create project", self._projects.create(project), full_reload=True)

    # ---- lookups for front ends ----

    def find_user(self, user_id: int) -> User | None:
        return next((u for u in self.state.users if u.id == user_id), None)

    def find_project(self, project_id: int) -> Project | None:
        return next((p for p in self.state.projects if p.id == project_id), None)
