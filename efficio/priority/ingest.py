"""Turn raw task rows into validated ``Task`` records.

Rows come from the hosted task table (snake_case columns such as
``due_date``) or from the web client (``dueDate``/``createdAt``). Values
outside the priority/frequency sets are rejected here, so the engine only
ever sees well-typed tasks.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from efficio.errors import TaskValidationError
from efficio.priority.models import Frequency, Priority, Task, to_utc

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def _unwrap(value: Any) -> Any:
    # numpy scalars (numpy.bool_, numpy.int64, ...) coming out of a DataFrame
    if hasattr(value, "item") and pd.api.types.is_scalar(value):
        return value.item()
    return value


def _coerce_timestamp(value: Any) -> Optional[datetime]:
    if _is_missing(value):
        return None
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif isinstance(value, str):
        try:
            # ISO-8601 only; relative words such as "now" or "today" are rejected
            value = pd.to_datetime(value.strip(), format="ISO8601").to_pydatetime()
        except (ValueError, TypeError) as exc:
            raise ValueError(f"invalid timestamp {value!r}") from exc
    if not isinstance(value, datetime):
        raise ValueError(f"invalid timestamp {value!r}")
    return to_utc(value)


class TaskRecord(BaseModel):
    """Validation model for one raw task row."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    frequency: Frequency = Frequency.ONCE
    due_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("due_date", "dueDate")
    )
    completed: bool = False
    created_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    attachments: Tuple[str, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        value = _unwrap(value)
        if isinstance(value, float) and value.is_integer():
            # id columns with gaps come out of a DataFrame as floats
            value = int(value)
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            value = str(value).strip()
        if value == "":
            raise ValueError("id must not be blank")
        return value

    @field_validator("title", "description", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("completed", mode="before")
    @classmethod
    def _completed_flag(cls, value: Any) -> Any:
        return _unwrap(value)

    @field_validator("due_date", "created_at", mode="before")
    @classmethod
    def _timestamps(cls, value: Any) -> Optional[datetime]:
        return _coerce_timestamp(value)

    @field_validator("attachments", mode="before")
    @classmethod
    def _attachment_refs(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, (list, tuple)):
            return value
        refs = []
        for item in value:
            if isinstance(item, Mapping):
                # uploaded file descriptors carry the public URL or storage path
                item = item.get("url") or item.get("path") or item.get("name")
            refs.append(item)
        return tuple(refs)

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            priority=self.priority,
            frequency=self.frequency,
            due_date=self.due_date,
            completed=self.completed,
            description=self.description,
            created_at=self.created_at,
            attachments=self.attachments,
        )


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "record"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_task(record: Mapping[str, Any]) -> Task:
    """Validate one raw row and return it as a ``Task``.

    Raises:
        TaskValidationError: if a required field is missing or a value is
            outside its allowed set.
    """
    if not isinstance(record, Mapping):
        raise TaskValidationError(f"expected a mapping, got {type(record).__name__}")

    # absent, null and NaN all mean "use the default"
    cleaned: Dict[str, Any] = {k: v for k, v in record.items() if not _is_missing(v)}
    raw_id = cleaned.get("id")
    task_id = str(_unwrap(raw_id)) if raw_id is not None else None

    try:
        return TaskRecord.model_validate(cleaned).to_task()
    except ValidationError as exc:
        raise TaskValidationError(_describe(exc), task_id=task_id) from exc


def parse_tasks(records: Iterable[Mapping[str, Any]], *, strict: bool = True) -> List[Task]:
    """Parse rows in order.

    With ``strict=False`` rejected rows are logged and skipped instead of
    aborting the whole snapshot.
    """
    tasks: List[Task] = []
    skipped = 0
    for record in records:
        try:
            tasks.append(parse_task(record))
        except TaskValidationError as exc:
            if strict:
                raise
            skipped += 1
            logger.warning("Skipping invalid task row: %s", exc)
    if skipped:
        logger.info("Loaded %d task(s), skipped %d invalid row(s)", len(tasks), skipped)
    return tasks


def tasks_from_frame(df: pd.DataFrame, *, strict: bool = True) -> List[Task]:
    """Parse a DataFrame whose columns follow the task table."""
    if df.empty:
        return []
    return parse_tasks(df.to_dict("records"), strict=strict)
