"""Task and suggestion records used by the priority suggestion engine.

Tasks are owned by the task store; the engine only ever reads them, so both
records are frozen.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple


@total_ordering
class Priority(Enum):
    """Task priority, ordered urgent > high > medium > low."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank


_PRIORITY_RANK = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.URGENT: 3,
}


class Frequency(Enum):
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


REASON_DUE_SOON = "Due date is approaching soon"
REASON_DUE_WITHIN_WEEK = "Consider increasing priority - due within a week"
REASON_OVERDUE = "This task is overdue!"
REASON_DAILY_ROUTINE = "Daily tasks should be prioritized to maintain routine"


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Attributes:
        id: Opaque identifier assigned by the task store
        title: Non-empty task title
        priority: Current priority
        frequency: How often the task recurs
        due_date: Optional due timestamp
        completed: Whether the task has been ticked off
        description: Free text, never read by the engine
        created_at: Creation timestamp, if known
        attachments: References (storage paths or URLs) to uploaded files
    """

    id: str
    title: str
    priority: Priority = Priority.MEDIUM
    frequency: Frequency = Frequency.ONCE
    due_date: Optional[datetime] = None
    completed: bool = False
    description: str = ""
    created_at: Optional[datetime] = None
    attachments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Suggestion:
    """Advisory priority change for one task. Never persisted."""

    task: Task
    reason: str
    suggested_priority: Priority

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task_id": self.task.id,
            "title": self.task.title,
            "reason": self.reason,
            "suggested_priority": self.suggested_priority.value,
            "current_priority": self.task.priority.value,
        }
