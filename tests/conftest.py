# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real flat-file TaskStore under tmp_path."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return AppState(settings=settings, task_store=TaskStore(settings.tasks_path))
