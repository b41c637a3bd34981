# src/taskboard/cli/console.py

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from ..core.board import TaskBoard
from .commands import registry as command_registry

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"/exit", "/quit", "/q"}
PROMPT = ">>> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class _LineReader:
    """
    Reads stdin on a daemon thread, one line per `next_line()` call.

    The thread is not part of the loop's executor, so Ctrl-C ends the process
    even while it is blocked in input(). A line is only requested once the
    previous reply has been printed, which keeps the prompt in order.
    """

    def __init__(self, read_line: Callable[[str], str]) -> None:
        self._read_line = read_line
        self._wanted = threading.Event()
        self._stopped = False
        self._lines: asyncio.Queue[str | None] = asyncio.Queue()
        self._loop = asyncio.get_running_loop()
        self._thread = threading.Thread(target=self._run, name="console-stdin", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while True:
            self._wanted.wait()
            self._wanted.clear()
            if self._stopped:
                return
            try:
                line: str | None = self._read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                line = None
            try:
                self._loop.call_soon_threadsafe(self._lines.put_nowait, line)
            except RuntimeError:
                # Loop already closed.
                return
            if line is None:
                return

    async def next_line(self) -> str | None:
        """None means stdin is closed."""
        self._wanted.set()
        return await self._lines.get()

    def stop(self) -> None:
        self._stopped = True
        self._wanted.set()


async def run_console_loop(
    board: TaskBoard,
    *,
    app_name: str = "taskboard",
    read_line: Callable[[str], str] = input,
) -> None:
    logger.info("Console started.")
    _print_ts(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")

    reader = _LineReader(read_line)
    try:
        while True:
            raw = await reader.next_line()
            if raw is None:
                print()
                break

            line = raw.strip()
            if not line:
                continue
            if line.lower() in EXIT_COMMANDS:
                break

            try:
                reply = await command_registry.handle(board, line)
            except Exception:
                logger.exception("Command failed: %s", line)
                reply = "Command failed (see log for details)."

            if reply is None:
                reply = "Not a command. Use /help to list available commands."
            _print_ts(reply)
    finally:
        reader.stop()

    logger.info("Console stopped.")
