# tests/test_console.py

from __future__ import annotations

import pytest

from taskboard.cli.console import run_console_loop
from taskboard.core.board import TaskBoard


class ScriptedInput:
    """Stands in for input(): returns the scripted lines, then raises EOFError."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.mark.asyncio
async def test_console_runs_commands_until_exit(board: TaskBoard, capsys: pytest.CaptureFixture[str]) -> None:
    scripted = ScriptedInput("/help", "   ", "hello", "/tasks", "/exit", "/never")

    await run_console_loop(board, app_name="test", read_line=scripted)

    out = capsys.readouterr().out
    assert "[test] Use /help for commands." in out
    assert "Available commands:" in out
    assert "Not a command. Use /help to list available commands." in out
    assert "No tasks found." in out
    assert scripted.lines == ["/never"]
    assert scripted.prompts == [">>> "] * 5


@pytest.mark.asyncio
async def test_console_stops_on_end_of_input(board: TaskBoard, capsys: pytest.CaptureFixture[str]) -> None:
    scripted = ScriptedInput("/stats")

    await run_console_loop(board, read_line=scripted)

    assert "Total: 0" in capsys.readouterr().out
    assert len(scripted.prompts) == 2
