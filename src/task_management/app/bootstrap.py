"""
Composition root: settings -> reference collaborators -> TaskService.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from task_management.config import Settings, get_settings
from task_management.infra.memory.audit import InMemoryAuditLog
from task_management.infra.memory.notifier import LoggingNotifier
from task_management.infra.memory.task_store import InMemoryTaskStore
from task_management.infra.memory.users import StaticUserDirectory
from task_management.observability.logging import setup_logging
from task_management.services.task_service import TaskService

logger = logging.getLogger("task_management.system")


@dataclass
class ServiceContainer:
    settings: Settings
    service: TaskService
    store: InMemoryTaskStore
    users: StaticUserDirectory
    notifier: LoggingNotifier
    audit: InMemoryAuditLog


def build_service(
    settings: Optional[Settings] = None,
    *,
    clock: Optional[Callable[[], datetime]] = None,
) -> ServiceContainer:
    if settings is None:
        settings = get_settings()

    store = InMemoryTaskStore()
    users = StaticUserDirectory(settings.active_user_ids)
    notifier = LoggingNotifier()
    audit = InMemoryAuditLog(clock=clock)
    svc = TaskService(store, users, notifier, audit, clock=clock)

    return ServiceContainer(
        settings=settings,
        service=svc,
        store=store,
        users=users,
        notifier=notifier,
        audit=audit,
    )


def create_app(settings: Optional[Settings] = None) -> ServiceContainer:
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    logger.info(
        "system.start",
        extra={
            "category": "system",
            "event": "system.start",
            "app_name": settings.app_name,
            "active_users": len(settings.active_user_ids),
        },
    )
    return build_service(settings)
