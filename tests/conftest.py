from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from efficio.priority.models import Frequency, Priority, Task


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_task(now):
    """Build tasks relative to ``now``; ``due_in`` is a number of days."""
    ids = count(1)

    def _make(
        title=None,
        *,
        priority=Priority.MEDIUM,
        frequency=Frequency.ONCE,
        due_in=None,
        completed=False,
    ) -> Task:
        task_id = str(next(ids))
        return Task(
            id=task_id,
            title=title or f"Task {task_id}",
            priority=priority,
            frequency=frequency,
            due_date=now + timedelta(days=due_in) if due_in is not None else None,
            completed=completed,
        )

    return _make
