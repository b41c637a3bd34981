# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..api.models import Project, Task, User
from .derived import TaskFilter


class ViewMode(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass
class BoardState:
    """
    Everything the task board shows.

    The collections are a cache of the server: they are replaced wholesale on
    every load and never patched in place.
    """

    mode: ViewMode = ViewMode.IDLE
    error: str | None = None

    tasks: list[Task] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)

    task_filter: TaskFilter = field(default_factory=TaskFilter)

    def clear_collections(self) -> None:
        self.tasks = []
        self.users = []
        self.projects = []
