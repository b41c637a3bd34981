# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the credential store, ApiClient, resource APIs and TaskBoard together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ..api.client import ApiClient
from ..api.credentials import JsonFileCredentialStore
from ..api.projects import ProjectApi
from ..api.tasks import TaskApi
from ..api.users import UserApi
from ..config import Settings, get_settings
from ..core.board import TaskBoard

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    client: ApiClient
    users: UserApi
    projects: ProjectApi
    tasks: TaskApi
    board: TaskBoard

    async def aclose(self) -> None:
        await self.client.aclose()


def create_api_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiClient:
    credentials = JsonFileCredentialStore(settings.credentials_path, key=settings.token_key)
    return ApiClient(
        settings.api_base_url,
        timeout=settings.api_timeout_seconds,
        credentials=credentials,
        logger=logging.getLogger("taskboard.api.http"),
        transport=transport,
    )


def create_app(
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    """
    Build the app from the provided settings.

    Keeping settings (and the transport) injectable makes the app easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    client = create_api_client(settings, transport=transport)
    users = UserApi(client)
    projects = ProjectApi(client)
    tasks = TaskApi(client)
    board = TaskBoard(tasks=tasks, users=users, projects=projects, base_url=settings.api_base_url)

    logger.debug("App wired: base_url=%s timeout=%.1fs", settings.api_base_url, settings.api_timeout_seconds)
    return AppContext(
        settings=settings,
        client=client,
        users=users,
        projects=projects,
        tasks=tasks,
        board=board,
    )
