from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from efficio.priority.models import REASON_OVERDUE, Frequency, Priority, Suggestion, Task, to_utc


def test_priority_is_totally_ordered():
    assert Priority.URGENT > Priority.HIGH > Priority.MEDIUM > Priority.LOW
    assert sorted([Priority.HIGH, Priority.LOW, Priority.URGENT, Priority.MEDIUM]) == [
        Priority.LOW,
        Priority.MEDIUM,
        Priority.HIGH,
        Priority.URGENT,
    ]
    assert max(Priority) == Priority.URGENT


def test_enums_parse_lowercase_values_only():
    assert Priority("urgent") is Priority.URGENT
    assert Frequency("yearly") is Frequency.YEARLY
    with pytest.raises(ValueError):
        Priority("Urgent")
    with pytest.raises(ValueError):
        Frequency("fortnightly")


def test_task_defaults():
    task = Task(id="1", title="Call mum")

    assert task.priority == Priority.MEDIUM
    assert task.frequency == Frequency.ONCE
    assert task.due_date is None
    assert task.completed is False
    assert task.attachments == ()


def test_task_is_read_only():
    task = Task(id="1", title="Call mum")

    with pytest.raises(dataclasses.FrozenInstanceError):
        task.priority = Priority.URGENT


def test_suggestion_to_dict():
    task = Task(id="9", title="File taxes", priority=Priority.HIGH)

    data = Suggestion(task, REASON_OVERDUE, Priority.URGENT).to_dict()

    assert data == {
        "task_id": "9",
        "title": "File taxes",
        "reason": "This task is overdue!",
        "suggested_priority": "urgent",
        "current_priority": "high",
    }


def test_to_utc():
    naive = datetime(2026, 1, 1, 8, 0)
    plus_two = datetime(2026, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_utc(naive) == datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc)
    assert to_utc(plus_two).tzinfo == timezone.utc
    assert to_utc(plus_two).hour == 8
