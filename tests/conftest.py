# tests/conftest.py

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio

from taskboard.api.client import ApiClient
from taskboard.api.projects import ProjectApi
from taskboard.api.tasks import TaskApi
from taskboard.api.users import UserApi
from taskboard.config import Settings
from taskboard.core.board import TaskBoard

from .fakes import FakeBackend, FakeCredentials

BASE_URL = "http://testserver/api"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a fake server and a per-test data dir.

    Built directly rather than from the environment to keep tests deterministic.
    """
    return Settings(
        app_name="taskboard-test",
        log_level="DEBUG",
        api_base_url=BASE_URL,
        api_timeout_seconds=5.0,
        credentials_path=tmp_path / "credentials.json",
        token_key="authToken",
        data_dir=tmp_path,
    )


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def credentials() -> FakeCredentials:
    return FakeCredentials()


@pytest_asyncio.fixture()
async def client(backend: FakeBackend, credentials: FakeCredentials) -> AsyncIterator[ApiClient]:
    async with ApiClient(BASE_URL, credentials=credentials, transport=backend.transport()) as c:
        yield c


@pytest.fixture()
def board(client: ApiClient) -> TaskBoard:
    """TaskBoard wired to the real API classes over the fake backend."""
    return TaskBoard(
        tasks=TaskApi(client),
        users=UserApi(client),
        projects=ProjectApi(client),
        base_url=BASE_URL,
    )
