"""Heuristic priority suggestions for a snapshot of tasks.

Rules run in a fixed order over incomplete tasks only:

1. due within ``due_soon_days`` either side of now -> urgent
2. low priority, due after that but within ``due_within_week_days`` -> high
3. overdue -> urgent
4. the first ``daily_routine_limit`` low priority daily tasks -> medium

Results are concatenated in rule order and cut to ``limit``. There is no
de-duplication across rules: a task overdue by up to ``due_soon_days`` is
reported by both rule 1 and rule 3.
"""
from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from efficio.priority.config import PrioritySuggestionConfig
from efficio.priority.models import (
    REASON_DAILY_ROUTINE,
    REASON_DUE_SOON,
    REASON_DUE_WITHIN_WEEK,
    REASON_OVERDUE,
    Frequency,
    Priority,
    Suggestion,
    Task,
    to_utc,
)

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def days_until_due(due_date: datetime, now: datetime) -> int:
    """Whole days until ``due_date``, rounded up (negative once overdue)."""
    return math.ceil((to_utc(due_date) - to_utc(now)) / _ONE_DAY)


class PrioritySuggestionEngine:
    """Stateless rule engine; ``generate`` is a pure function of its inputs."""

    def __init__(self, config: Optional[PrioritySuggestionConfig] = None):
        self.config = config or PrioritySuggestionConfig()

    def generate(self, tasks: Iterable[Task], now: datetime) -> List[Suggestion]:
        now = to_utc(now)
        incomplete = [t for t in tasks if not t.completed]

        suggestions: List[Suggestion] = []
        suggestions.extend(self._due_soon(incomplete, now))
        suggestions.extend(self._due_within_week(incomplete, now))
        suggestions.extend(self._overdue(incomplete, now))
        suggestions.extend(self._daily_routine(incomplete))

        limited = suggestions[: self.config.limit]
        logger.debug(
            "Generated %d priority suggestion(s) for %d open task(s)%s",
            len(limited),
            len(incomplete),
            f" (truncated from {len(suggestions)})" if len(suggestions) > len(limited) else "",
        )
        return limited

    def _due_soon(self, tasks: List[Task], now: datetime) -> List[Suggestion]:
        out = []
        for task in tasks:
            if task.due_date is None or task.priority == Priority.URGENT:
                continue
            days = days_until_due(task.due_date, now)
            if -self.config.due_soon_days <= days <= self.config.due_soon_days:
                out.append(Suggestion(task, REASON_DUE_SOON, Priority.URGENT))
        return out

    def _due_within_week(self, tasks: List[Task], now: datetime) -> List[Suggestion]:
        out = []
        for task in tasks:
            if task.due_date is None or task.priority != Priority.LOW:
                continue
            days = days_until_due(task.due_date, now)
            if self.config.due_soon_days < days <= self.config.due_within_week_days:
                out.append(Suggestion(task, REASON_DUE_WITHIN_WEEK, Priority.HIGH))
        return out

    def _overdue(self, tasks: List[Task], now: datetime) -> List[Suggestion]:
        return [
            Suggestion(task, REASON_OVERDUE, Priority.URGENT)
            for task in tasks
            if task.due_date is not None
            and task.priority != Priority.URGENT
            and to_utc(task.due_date) < now
        ]

    def _daily_routine(self, tasks: List[Task]) -> List[Suggestion]:
        daily = [t for t in tasks if t.frequency == Frequency.DAILY and t.priority == Priority.LOW]
        return [
            Suggestion(task, REASON_DAILY_ROUTINE, Priority.MEDIUM)
            for task in daily[: self.config.daily_routine_limit]
        ]


def generate_suggestions(
    tasks: Iterable[Task],
    now: Optional[datetime] = None,
    config: Optional[PrioritySuggestionConfig] = None,
) -> List[Suggestion]:
    """Convenience wrapper that reads the clock when ``now`` is not given."""
    if now is None:
        now = datetime.now(timezone.utc)
    return PrioritySuggestionEngine(config).generate(tasks, now)
