# src/taskboard/core/ports.py

"""
Ports (interfaces) used by the views and the HTTP client.

The views depend on Protocols instead of the concrete API classes, so tests
can hand them fakes and the REST layer can be swapped.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..api.models import Priority, Project, Task, TaskStatus, User


class CredentialProvider(Protocol):
    """Source of the bearer token, consulted once per outgoing request."""

    def get_token(self) -> str | None: ...


class UserRepo(Protocol):
    async def get_all(self, params: dict[str, Any] | None = None) -> list[User]: ...
    async def create(self, entity: User) -> User: ...


class ProjectRepo(Protocol):
    async def get_all(self, params: dict[str, Any] | None = None) -> list[Project]: ...
    async def create(self, entity: Project) -> Project: ...


class TaskRepo(Protocol):
    async def get_all(
            self,
            status: TaskStatus | None = None,
            priority: Priority | None = None,
    ) -> list[Task]: ...

    async def create(self, entity: Task) -> Task: ...
    async def update(self, entity_id: int, entity: Task) -> Task: ...
    async def update_status(self, task_id: int, status: TaskStatus) -> Task: ...
    async def delete(self, entity_id: int) -> None: ...


class EntityRepo(Protocol):
    """What the generic CRUD board needs from its API service."""

    async def get_all(self, params: dict[str, Any] | None = None) -> list[Any]: ...
    async def get_by_user_id(self, user_id: int) -> list[Any]: ...
    async def create(self, entity: Any) -> Any: ...
    async def update(self, entity_id: int, entity: Any) -> Any: ...
    async def update_status(self, entity_id: int, status: Any) -> Any: ...
    async def delete(self, entity_id: int) -> None: ...
