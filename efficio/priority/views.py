"""Read-only orderings and filters over a task snapshot.

These back the list view (most pressing first) and the calendar view
(tasks per day, highlighted days).
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List

from efficio.priority.models import Task, to_utc


def sort_by_priority(tasks: Iterable[Task]) -> List[Task]:
    """Urgent first, then high, medium, low; ties keep their input order."""
    return sorted(tasks, key=lambda t: -t.priority.rank)


def _due_day(task: Task) -> date:
    return to_utc(task.due_date).date()


def tasks_due_on(tasks: Iterable[Task], day: date) -> List[Task]:
    if isinstance(day, datetime):
        day = to_utc(day).date()
    return [t for t in tasks if t.due_date is not None and _due_day(t) == day]


def due_dates(tasks: Iterable[Task]) -> List[date]:
    return sorted({_due_day(t) for t in tasks if t.due_date is not None})
