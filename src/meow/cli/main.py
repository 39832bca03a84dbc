# src/meow/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(log_dir=settings.data_dir, console_level=settings.console_log_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
