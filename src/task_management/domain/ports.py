"""
Collaborator interfaces consumed by TaskService.

Each one is a small Protocol so stores, directories and sinks can be swapped
(or replaced with test doubles) without touching the service.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from task_management.domain.task_models import TaskItem


class TaskStore(Protocol):
    def find_task(self, task_id: int) -> Optional[TaskItem]: ...
    def get_user_tasks(self, user_id: int) -> Sequence[TaskItem]: ...
    def save(self, task: TaskItem) -> None: ...
    def delete(self, task_id: int) -> None: ...


class UserDirectory(Protocol):
    def is_active_user(self, user_id: int) -> bool: ...


class Notifier(Protocol):
    def notify_created(self, user_id: int, title: str) -> None: ...
    def notify_completed(self, user_id: int, title: str) -> None: ...


class AuditLog(Protocol):
    """`action` is one of CREATE, COMPLETE, DELETE, UPDATE_PRIORITY."""
    def log(self, action: str, user_id: int, detail: str) -> None: ...
