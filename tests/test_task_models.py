# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from task_management.domain.task_models import TaskItem, TaskPriority, as_utc, parse_priority


def test_task_item_defaults() -> None:
    task = TaskItem(id=1, user_id=1, title="x")

    assert task.priority is TaskPriority.medium
    assert task.deadline is None
    assert task.is_completed is False


def test_task_item_rejects_empty_title_and_unknown_priority() -> None:
    with pytest.raises(ValidationError):
        TaskItem(id=1, user_id=1, title="")
    with pytest.raises(ValidationError):
        TaskItem(id=1, user_id=1, title="x", priority="Urgent")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Low", TaskPriority.low),
        ("Medium", TaskPriority.medium),
        ("High", TaskPriority.high),
        (TaskPriority.high, TaskPriority.high),
        ("high", None),
        (" Low", None),
        (None, None),
        (2, None),
    ],
)
def test_parse_priority_is_exact(raw, expected) -> None:
    assert parse_priority(raw) is expected


def test_as_utc() -> None:
    naive = datetime(2026, 1, 1, 9, 30)
    aware = datetime(2026, 1, 1, 9, 30, tzinfo=timezone.utc)

    assert as_utc(naive) == aware
    assert as_utc(aware) is aware
