# src/meow/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as default_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState, registry: CommandRegistry | None = None) -> None:
    """Read commands from stdin until "bye", EOF or Ctrl+C."""
    registry = registry or default_registry
    logger.info("Console connector started (tasks=%d).", state.tasks.count)

    print(state.persona.welcome())
    for notice in state.notices:
        print(notice)

    while not state.exit_requested:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            response = registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        print(response)

    logger.info("Console connector finished.")
