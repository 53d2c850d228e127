# src/task_tracker/cli/menu.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import parse_task_id

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str | None]

MENU_TITLE = "Task Manager"
EXIT_CHOICE = 6
INVALID_CHOICE = "Invalid choice, please try again."
INVALID_ID = "Invalid ID, please try again."

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered-menu registry used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, handler: MenuHandler, label: str) -> None:
        self._handlers[choice] = handler
        self._labels[choice] = label

    def handle(self, state: AppState, line: str, ask: Prompt) -> str | None:
        """
        Dispatch a selector line like "3".
        Returns the text to print, or None if the action has nothing to say.
        """
        choice = parse_task_id(line, trim=True)
        if choice is None:
            return INVALID_CHOICE

        handler = self._handlers.get(choice)
        if handler is None:
            return INVALID_CHOICE

        return handler(state, ask)

    def build_menu(self) -> str:
        lines = [MENU_TITLE]
        for choice in sorted(self._labels):
            lines.append(f"{choice}. {self._labels[choice]}")
        lines.append(f"{EXIT_CHOICE}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def _ask_id(ask: Prompt, prompt: str) -> int | None:
    task_id = parse_task_id(ask(prompt), trim=True)
    if task_id is None:
        logger.debug("Rejected task id input for prompt %r", prompt)
    return task_id


def cmd_add(state: AppState, ask: Prompt) -> str | None:
    title = ask("Enter task title:").strip()
    description = ask("Enter task description:").strip()
    task_api.add_task(state, title, description)
    return None


def cmd_list(state: AppState, ask: Prompt) -> str | None:
    lines = task_api.list_tasks(state)
    if not lines:
        return None
    return "\n".join(lines)


def cmd_complete(state: AppState, ask: Prompt) -> str | None:
    task_id = _ask_id(ask, "Enter task ID to mark as completed:")
    if task_id is None:
        return INVALID_ID
    return task_api.complete_task(state, task_id)


def cmd_soft_delete(state: AppState, ask: Prompt) -> str | None:
    task_id = _ask_id(ask, "Enter task ID to mark as deleted:")
    if task_id is None:
        return INVALID_ID
    return task_api.soft_delete_task(state, task_id)


def cmd_delete(state: AppState, ask: Prompt) -> str | None:
    task_id = _ask_id(ask, "Enter task ID to delete:")
    if task_id is None:
        return INVALID_ID
    return task_api.delete_task(state, task_id)


registry.register(1, cmd_add, label="Add Task")
registry.register(2, cmd_list, label="List Tasks")
registry.register(3, cmd_complete, label="Mark Task as Completed")
registry.register(4, cmd_soft_delete, label="Mark Task as Deleted")
registry.register(5, cmd_delete, label="Delete Task")
