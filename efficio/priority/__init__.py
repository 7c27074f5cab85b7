"""Priority suggestions for a snapshot of tasks.

This package contains:
- Task/Suggestion records with closed Priority/Frequency enums
- The rule engine that proposes priority changes
- Ingestion helpers that validate raw task rows (dicts or DataFrames)
- List/calendar view helpers and suggestion serialisation
"""

from .config import PrioritySuggestionConfig
from .engine import PrioritySuggestionEngine, days_until_due, generate_suggestions
from .ingest import parse_task, parse_tasks, tasks_from_frame
from .models import (
    REASON_DAILY_ROUTINE,
    REASON_DUE_SOON,
    REASON_DUE_WITHIN_WEEK,
    REASON_OVERDUE,
    Frequency,
    Priority,
    Suggestion,
    Task,
)
from .report import SuggestionSummary, suggestions_to_frame, suggestions_to_records, summarize
from .views import due_dates, sort_by_priority, tasks_due_on

__all__ = [
    "PrioritySuggestionConfig",
    "PrioritySuggestionEngine",
    "days_until_due",
    "generate_suggestions",
    "parse_task",
    "parse_tasks",
    "tasks_from_frame",
    "REASON_DAILY_ROUTINE",
    "REASON_DUE_SOON",
    "REASON_DUE_WITHIN_WEEK",
    "REASON_OVERDUE",
    "Frequency",
    "Priority",
    "Suggestion",
    "Task",
    "SuggestionSummary",
    "suggestions_to_frame",
    "suggestions_to_records",
    "summarize",
    "due_dates",
    "sort_by_priority",
    "tasks_due_on",
]
