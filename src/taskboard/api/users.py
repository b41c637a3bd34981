# src/taskboard/api/users.py

from __future__ import annotations

from .client import ApiClient
from .models import User
from .resource import ResourceService


class UserApi(ResourceService[User]):
    """/users: plain CRUD, no extra queries."""

    def __init__(self, client: ApiClient) -> None:
        super().__init__(client, "/users", User.from_json)
