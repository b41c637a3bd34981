# src/taskboard/api/projects.py

from __future__ import annotations

from .client import ApiClient
from .models import Project
from .resource import ResourceService


class ProjectApi(ResourceService[Project]):
    def __init__(self, client: ApiClient) -> None:
        super().__init__(client, "/projects", Project.from_json)

    async def get_by_user_id(self, user_id: int) -> list[Project]:
        """Projects created by the given user."""
        return await self.query(f"user/{int(user_id)}")
