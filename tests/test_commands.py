# tests/test_commands.py

from __future__ import annotations

import pytest

from taskboard.cli.commands import CommandRegistry, registry
from taskboard.core.board import TaskBoard

from .conftest import BASE_URL
from .fakes import FakeBackend


@pytest.mark.asyncio
async def test_registry_routes_and_aliases(board: TaskBoard) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    async def handler(b: TaskBoard, args: list[str]) -> str:
        called.append(args)
        return "ok"

    reg.register("ping", handler, "ping", aliases=["p"])

    assert await reg.handle(board, "/ping a b") == "ok"
    assert await reg.handle(board, "/P") == "ok"
    assert called == [["a", "b"], []]
    assert reg.build_help() == "Available commands:\n  /ping - ping"


@pytest.mark.asyncio
async def test_registry_unknown_and_non_command(board: TaskBoard) -> None:
    reg = CommandRegistry()
    assert await reg.handle(board, "hello") is None
    assert "Empty command" in (await reg.handle(board, "/") or "")
    assert "Unknown command: /nope" in (await reg.handle(board, "/nope") or "")


@pytest.mark.asyncio
async def test_console_session(board: TaskBoard, backend: FakeBackend) -> None:
    assert await registry.handle(board, "/load") == "Loaded 0 tasks, 0 users, 0 projects."
    assert await registry.handle(board, "/tasks") == "No tasks found. Create one with /add-task."

    assert await registry.handle(board, "/add-user Ada Lovelace ada@example.com") == "User created."
    ada = board.state.users[0]
    assert (ada.name, ada.email) == ("Ada Lovelace", "ada@example.com")

    assert await registry.handle(board, f"/add-project Engine user={ada.id}") == "Project created."
    engine = board.state.projects[0]
    assert await registry.handle(board, "/projects") == f"#{engine.id} Engine (by Ada Lovelace)"

    reply = await registry.handle(
        board, f"/add-task Write docs priority=high user={ada.id} project={engine.id} due=2024-02-01"
    )
    assert reply == "Task created."
    task = board.state.tasks[0]
    assert await registry.handle(board, "/ls") == (
        f"#{task.id} [TODO] (HIGH) Write docs  <user: Ada Lovelace, project: Engine, due: 2024-02-01>"
    )

    assert await registry.handle(board, f"/status {task.id} done") == f"Task #{task.id} status updated."
    stats = await registry.handle(board, "/stats") or ""
    assert "Total: 1" in stats
    assert "Done: 1" in stats
    assert "High: 1" in stats

    assert await registry.handle(board, "/filter status=todo") == "Filter: status=TODO priority=ALL"
    assert await registry.handle(board, "/tasks") == "No tasks found. Create one with /add-task."
    assert await registry.handle(board, "/filter clear") == "Filter cleared."
    assert await registry.handle(board, "/filter") == "Filter: status=ALL priority=ALL"

    assert await registry.handle(board, f"/rm {task.id}") == f"Task #{task.id} deleted."
    assert board.state.tasks == []


@pytest.mark.asyncio
async def test_bad_input_is_reported_not_raised(board: TaskBoard, backend: FakeBackend) -> None:
    await board.load()

    assert await registry.handle(board, "/status abc DONE") == "Invalid input: task id must be a number, got 'abc'"
    assert (await registry.handle(board, "/status 1 BLOCKED") or "").startswith("Invalid input: Invalid task status")
    assert await registry.handle(board, "/add-task priority=LOW") == "Invalid input: title is required"
    assert await registry.handle(board, "/add-task x user=5") == "No user #5 on the board. Use /load first."
    assert await registry.handle(board, "/add-user Ada") == "Usage: /add-user <name> <email>"
    assert await registry.handle(board, "/delete") == "Usage: /delete <task id>"
    assert backend.requests[-1].method == "GET"


@pytest.mark.asyncio
async def test_server_failures_surface_board_messages(board: TaskBoard, backend: FakeBackend) -> None:
    assert await registry.handle(board, "/delete 99") == "Failed to delete task"

    backend.go_offline("GET", "/tasks")
    reply = await registry.handle(board, "/load") or ""
    assert reply.startswith("Failed to load data.")
    assert BASE_URL in reply


@pytest.mark.asyncio
async def test_help_lists_every_command(board: TaskBoard) -> None:
    text = await registry.handle(board, "/help") or ""
    for name in ("load", "tasks", "users", "projects", "stats", "filter", "add-task", "add-user", "add-project", "status", "delete"):
        assert f"/{name} - " in text
