# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

_ID_RE = re.compile(r"\+?[0-9]+")

MAX_TASK_ID = 2**32 - 1


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values double as the status tokens of the backing file, so they are
    case-sensitive and must not be renamed.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"
    DELETED = "Deleted"

    @classmethod
    def from_token(cls, raw: str | None) -> TaskStatus | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING

    def mark_completed(self) -> None:
        self.status = TaskStatus.COMPLETED

    def mark_deleted(self) -> None:
        """Soft delete: the task stays in the store and in the file."""
        self.status = TaskStatus.DELETED


def parse_task_id(raw: str | None, *, trim: bool = False) -> int | None:
    """
    Parse an unsigned 32-bit id: ASCII digits with an optional leading "+".

    The file loader parses untrimmed fields; console input passes trim=True.
    """
    if raw is None:
        return None
    if trim:
        raw = raw.strip()
    if not _ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value > MAX_TASK_ID:
        return None
    return value
