import logging
import threading
from datetime import datetime
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from task_management.domain.errors import InvalidArgumentError, InvalidStateError
from task_management.domain.ports import AuditLog, Notifier, TaskStore, UserDirectory
from task_management.domain.task_models import (
    AuditAction,
    TaskItem,
    as_utc,
    parse_priority,
    utc_now,
)

logger = logging.getLogger("task_management.tasks")


class TaskService:
    """
    Create / complete / delete / reprioritize / query a user's tasks.

    create_task is strict and raises on bad input; the mutations are lenient
    and report every business-rule failure as False. Collaborator errors are
    not caught.
    """

    def __init__(
        self,
        store: TaskStore,
        users: UserDirectory,
        notifier: Notifier,
        audit: AuditLog,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.users = users
        self.notifier = notifier
        self.audit = audit
        self.clock = clock or utc_now
        self._next_id = 1
        self._id_lock = threading.Lock()

    def _now(self) -> datetime:
        return as_utc(self.clock())

    def _allocate_id(self) -> int:
        with self._id_lock:
            task_id = self._next_id
            self._next_id += 1
            return task_id

    def _reject_create(self, exc: Exception, user_id: int, reason: str) -> Exception:
        logger.warning(
            "task.create.rejected",
            extra={"category": "tasks", "event": "task.create.rejected", "user_id": user_id, "reason": reason},
        )
        return exc

    def _owned_task(self, user_id: int, task_id: int, event: str) -> Optional[TaskItem]:
        task = self.store.find_task(task_id)
        if task is None or task.user_id != user_id:
            logger.info(
                f"{event}.rejected",
                extra={
                    "category": "tasks",
                    "event": f"{event}.rejected",
                    "user_id": user_id,
                    "task_id": task_id,
                    "reason": "not_found" if task is None else "not_owner",
                },
            )
            return None
        return task

    def create_task(
        self,
        user_id: int,
        title: Optional[str],
        priority: Any,
        deadline: Optional[datetime] = None,
    ) -> TaskItem:
        if not self.users.is_active_user(user_id):
            raise self._reject_create(
                InvalidStateError(f"user {user_id} is not active"), user_id, "inactive_user"
            )

        if title is None or not title.strip():
            raise self._reject_create(
                InvalidArgumentError("title must not be empty"), user_id, "blank_title"
            )

        if deadline is not None:
            deadline = as_utc(deadline)
            if deadline <= self._now():
                raise self._reject_create(
                    InvalidArgumentError("deadline must be in the future"), user_id, "past_deadline"
                )

        parsed = parse_priority(priority)
        if parsed is None:
            raise self._reject_create(
                InvalidArgumentError(f"unknown priority: {priority!r}"), user_id, "bad_priority"
            )

        try:
            task = TaskItem(
                id=0,
                user_id=user_id,
                title=title,
                priority=parsed,
                deadline=deadline,
                is_completed=False,
            )
        except ValidationError as exc:
            raise self._reject_create(
                InvalidArgumentError(f"invalid task: {exc.errors()[0]['msg']}"), user_id, "invalid_task"
            ) from exc
        task.id = self._allocate_id()
        self.store.save(task)
        self.notifier.notify_created(user_id, title)
        self.audit.log(AuditAction.create.value, user_id, title)

        logger.info(
            "task.create",
            extra={"category": "tasks", "event": "task.create", "user_id": user_id, "task_id": task.id, "title": title},
        )
        return task

    def complete_task(self, user_id: int, task_id: int) -> bool:
        task = self._owned_task(user_id, task_id, "task.complete")
        if task is None:
            return False
        if task.is_completed:
            logger.info(
                "task.complete.rejected",
                extra={
                    "category": "tasks",
                    "event": "task.complete.rejected",
                    "user_id": user_id,
                    "task_id": task_id,
                    "reason": "already_completed",
                },
            )
            return False

        task.is_completed = True
        self.store.save(task)
        self.notifier.notify_completed(user_id, task.title)
        self.audit.log(AuditAction.complete.value, user_id, task.title)

        logger.info(
            "task.complete",
            extra={"category": "tasks", "event": "task.complete", "user_id": user_id, "task_id": task_id},
        )
        return True

    def delete_task(self, user_id: int, task_id: int) -> bool:
        task = self._owned_task(user_id, task_id, "task.delete")
        if task is None:
            return False

        self.store.delete(task_id)
        self.audit.log(AuditAction.delete.value, user_id, task.title)

        logger.info(
            "task.delete",
            extra={"category": "tasks", "event": "task.delete", "user_id": user_id, "task_id": task_id},
        )
        return True

    def update_priority(self, user_id: int, task_id: int, new_priority: Any) -> bool:
        task = self._owned_task(user_id, task_id, "task.update_priority")
        if task is None:
            return False

        parsed = parse_priority(new_priority)
        if parsed is None:
            logger.info(
                "task.update_priority.rejected",
                extra={
                    "category": "tasks",
                    "event": "task.update_priority.rejected",
                    "user_id": user_id,
                    "task_id": task_id,
                    "reason": "bad_priority",
                },
            )
            return False

        task.priority = parsed
        self.store.save(task)
        self.audit.log(AuditAction.update_priority.value, user_id, parsed.value)

        logger.info(
            "task.update_priority",
            extra={
                "category": "tasks",
                "event": "task.update_priority",
                "user_id": user_id,
                "task_id": task_id,
                "priority": parsed.value,
            },
        )
        return True

    def get_active_tasks(self, user_id: int) -> List[TaskItem]:
        return [t for t in self.store.get_user_tasks(user_id) if not t.is_completed]

    def get_overdue_tasks(self, user_id: int) -> List[TaskItem]:
        now = self._now()
        return [
            t
            for t in self.store.get_user_tasks(user_id)
            if not t.is_completed and t.deadline is not None and as_utc(t.deadline) < now
        ]
