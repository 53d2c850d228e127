# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class AppState:
    """
    Shared runtime state handed to every menu handler.

    `settings` is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: Any
    task_store: TaskStore
