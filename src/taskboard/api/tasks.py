# src/taskboard/api/tasks.py

from __future__ import annotations

from .client import ApiClient
from .models import Priority, Task, TaskStatus
from .resource import ResourceService


class TaskApi(ResourceService[Task]):
    """
    /tasks.

    `get_all` takes the two filters the server understands (status, priority) and
    sends only the ones that are set. `update_status` is a partial update against
    its own sub-path; `update` replaces the whole task.
    """

    def __init__(self, client: ApiClient) -> None:
        super().__init__(client, "/tasks", Task.from_json)

    async def get_all(  # type: ignore[override]
        self,
        status: TaskStatus | None = None,
        priority: Priority | None = None,
    ) -> list[Task]:
        params = {
            "status": TaskStatus.parse(status).value if status else None,
            "priority": Priority.parse(priority).value if priority else None,
        }
        return await super().get_all(params)

    async def get_by_status(self, status: TaskStatus) -> list[Task]:
        return await self.get_all(status=status)

    async def get_by_priority(self, priority: Priority) -> list[Task]:
        return await self.get_all(priority=priority)

    async def get_by_user_id(self, user_id: int) -> list[Task]:
        """Tasks assigned to the given user."""
        return await self.query(f"user/{int(user_id)}")

    async def get_by_project_id(self, project_id: int) -> list[Task]:
        return await self.query(f"project/{int(project_id)}")

    async def update_status(self, task_id: int, status: TaskStatus) -> Task:
        status = TaskStatus.parse(status)
        payload = await self.client.patch(self._path(task_id, "status"), {"status": status.value})
        return self._one(payload)
