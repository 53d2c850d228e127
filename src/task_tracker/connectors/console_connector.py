# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.menu import EXIT_CHOICE, registry as menu_registry
from ..core.state import AppState
from ..tasks.task_models import parse_task_id

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive menu on stdin/stdout.

    Prompts go on their own line (as in the original terminal UI), then one
    line of input is read. EOF or Ctrl+C anywhere ends the loop.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.path)

    def ask(prompt: str) -> str:
        write(prompt)
        return read_line()

    while True:
        write("\n" + menu_registry.build_menu())

        try:
            choice_line = read_line()
            if parse_task_id(choice_line, trim=True) == EXIT_CHOICE:
                logger.info("Console exit selected.")
                break
            reply = menu_registry.handle(state, choice_line, ask)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling a menu action."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
