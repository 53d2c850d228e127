# src/task_tracker/tasks/task_api.py

"""
User-facing task operations.

Each helper calls the store on state.task_store and returns the text the
console should print (or None when there is nothing to say).
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def not_found_message(task_id: int) -> str:
    return f"Task with ID {task_id} not found."


def format_task(task: Task) -> str:
    return f"ID: {task.id}, Title: {task.title}, Status: {task.status.value}"


def add_task(state: AppState, title: str, description: str) -> int:
    task_id = state.task_store.create(title, description)
    logger.debug("Added task id=%s", task_id)
    return task_id


def list_tasks(state: AppState) -> list[str]:
    return [format_task(t) for t in state.task_store.list_all()]


def complete_task(state: AppState, task_id: int) -> str | None:
    if not state.task_store.mark_completed(task_id):
        logger.debug("mark_completed: task %s not found", task_id)
        return not_found_message(task_id)
    return None


def soft_delete_task(state: AppState, task_id: int) -> str | None:
    if not state.task_store.mark_deleted(task_id):
        logger.debug("mark_deleted: task %s not found", task_id)
        return not_found_message(task_id)
    return None


def delete_task(state: AppState, task_id: int) -> str | None:
    if not state.task_store.hard_delete(task_id):
        logger.debug("hard_delete: task %s not found", task_id)
        return not_found_message(task_id)
    return None
