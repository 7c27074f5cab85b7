from __future__ import annotations

from typing import Optional


class EfficioError(Exception):
    """Base class for errors raised by efficio."""


class TaskValidationError(EfficioError, ValueError):
    """A task record was rejected at the ingestion boundary."""

    def __init__(self, message: str, *, task_id: Optional[str] = None):
        self.task_id = task_id
        if task_id is not None:
            message = f"Task {task_id!r}: {message}"
        super().__init__(message)
