# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the app (client + board), performs the initial
load, then runs the console REPL until /exit.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import AppContext, create_app
from ..config import get_settings
from ..logging_setup import setup_logging
from .console import run_console_loop

logger = logging.getLogger(__name__)


async def _run(app: AppContext) -> None:
    try:
        if not await app.board.load():
            print(app.board.error)
        await run_console_loop(app.board, app_name=app.settings.app_name)
    finally:
        await app.aclose()


def main() -> None:
    settings = get_settings()

    log_file = setup_logging(log_dir=settings.data_dir, console_level=settings.log_level)

    logger.info("Starting %s against %s...", settings.app_name, settings.api_base_url)
    logger.debug("Full log: %s", log_file)

    app = create_app(settings=settings)
    try:
        asyncio.run(_run(app))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
