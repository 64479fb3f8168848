# src/crew_schedule/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "\n".join(
    [
        "==============================================================",
        "           ASTRONAUT DAILY SCHEDULE ORGANIZER                 ",
        "==============================================================",
    ]
)


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    """
    Interactive loop: every line is a slash command (/add, /list, /remove, ...).

    Ends on /exit, /quit, EOF or Ctrl+C.
    """
    emit = state.emit
    logger.info("Console connector started.")
    emit(BANNER)
    emit("Type /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        emit(reply)

    logger.info("Console connector finished.")
