# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
from dataclasses import replace
from pathlib import Path

from .task_models import Task, TaskStatus, parse_task_id

logger = logging.getLogger(__name__)

FIELD_SEP = "|"


class TaskStore:
    """
    Flat-file task store.

    All tasks live in memory; the backing file is a plain-text mirror:
      <id>|<title>|<description>|<status>

    - load happens once, in the constructor
    - every mutation rewrites the whole file (no append, no partial update)
    - ids come from a monotonic counter and are never reused in-process,
      even after hard_delete

    Pipes and newlines inside title/description are not escaped;
    callers are expected to keep them out.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._load()
        logger.info(
            "TaskStore ready path=%s total=%s next_id=%s",
            self._path,
            len(self._tasks),
            self._next_id,
        )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- serialization ----

    @staticmethod
    def _task_to_line(task: Task) -> str:
        return FIELD_SEP.join((str(task.id), task.title, task.description, task.status.value)) + "\n"

    @staticmethod
    def _line_to_task(line: str) -> Task | None:
        parts = line.split(FIELD_SEP)
        if len(parts) != 4:
            return None
        task_id = parse_task_id(parts[0])
        if task_id is None:
            return None
        status = TaskStatus.from_token(parts[3])
        if status is None:
            return None
        return Task(id=task_id, title=parts[1], description=parts[2], status=status)

    def _load(self) -> None:
        if not self._path.exists():
            return

        try:
            contents = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read tasks from %s; starting empty.", self._path)
            return

        skipped = 0
        for lineno, raw in enumerate(contents.split("\n"), start=1):
            line = raw.removesuffix("\r")
            if not line:
                continue
            task = self._line_to_task(line)
            if task is None:
                skipped += 1
                logger.debug("Skipping malformed line %s in %s: %r", lineno, self._path, line)
                continue
            self._tasks[task.id] = task
            self._next_id = max(self._next_id, task.id + 1)

        if skipped:
            logger.debug("Skipped %s malformed line(s) in %s", skipped, self._path)

    def _save(self) -> None:
        """
        Rewrite the backing file from the in-memory mapping.

        Writes to a sibling temp file and swaps it in, so a failed write
        leaves the previous file intact. Errors are logged, never raised.
        """
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as fh:
                for task_id in sorted(self._tasks):
                    fh.write(self._task_to_line(self._tasks[task_id]))
            tmp.replace(self._path)
        except (OSError, UnicodeError):
            logger.exception("Failed to save tasks to %s", self._path)
        finally:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        """Return a copy; changes to it are not seen by the store."""
        task = self._tasks.get(task_id)
        return replace(task) if task is not None else None

    def list_all(self) -> list[Task]:
        """Copies of all tasks, soft-deleted ones included, ordered by id."""
        return [replace(self._tasks[k]) for k in sorted(self._tasks)]

    def create(self, title: str, description: str) -> int:
        task_id = self._next_id
        self._tasks[task_id] = Task(id=task_id, title=title, description=description)
        self._next_id += 1
        self._save()
        logger.debug("Task created id=%s title=%r", task_id, title)
        return task_id

    def mark_completed(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            return False
        task.mark_completed()
        self._save()
        logger.debug("Task completed id=%s", task_id)
        return True

    def mark_deleted(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        if task is None:
            return False
        task.mark_deleted()
        self._save()
        logger.debug("Task soft-deleted id=%s", task_id)
        return True

    def hard_delete(self, task_id: int) -> bool:
        if self._tasks.pop(task_id, None) is None:
            return False
        self._save()
        logger.debug("Task removed id=%s", task_id)
        return True
