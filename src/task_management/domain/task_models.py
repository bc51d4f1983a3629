from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum
from datetime import datetime, timezone
from typing import Any, Optional


class TaskPriority(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"


class AuditAction(str, Enum):
    create = "CREATE"
    complete = "COMPLETE"
    delete = "DELETE"
    update_priority = "UPDATE_PRIORITY"


class TaskItem(BaseModel):
    # Mutated in place by the service and re-saved; the store owns the instance.
    id: int
    user_id: int
    title: str = Field(min_length=1)
    priority: TaskPriority = TaskPriority.medium
    deadline: Optional[datetime] = None
    is_completed: bool = False


class AuditEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: AuditAction
    user_id: int
    detail: str
    recorded_at: datetime


def parse_priority(value: Any) -> Optional[TaskPriority]:
    """Exact, case-sensitive match against the fixed set; None when unknown."""
    if isinstance(value, TaskPriority):
        return value
    if not isinstance(value, str):
        return None
    try:
        return TaskPriority(value)
    except ValueError:
        return None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
