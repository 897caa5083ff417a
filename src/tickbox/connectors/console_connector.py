# src/tickbox/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import render_list
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive front-end.

    Slash lines go to the command registry; any other non-empty line is a new
    task, like typing into the page's input box and pressing Enter.
    """
    logger.info("Console connector started (tasks=%s).", len(state.store))
    write("Type a task to add it. Use /help for commands. Use /exit to quit.")
    write(render_list(state.render_model()))

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if user_input.startswith("/"):
                reply = command_registry.handle(state, user_input, emit=write)
            else:
                task = state.add(user_input)
                reply = f"Added #{task.id}.\n{render_list(state.render_model())}" if task else None
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
