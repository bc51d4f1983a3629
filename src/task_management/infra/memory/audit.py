from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from task_management.domain.task_models import AuditAction, AuditEntry, utc_now

logger = logging.getLogger("task_management.audit")


class InMemoryAuditLog:
    """
    AuditLog that keeps every entry in memory and mirrors it to the
    `task_management.audit` logger, so the JSONL log carries the trail too.
    """
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or utc_now
        self._entries: List[AuditEntry] = []

    def log(self, action: str, user_id: int, detail: str) -> None:
        entry = AuditEntry(
            action=AuditAction(action),
            user_id=user_id,
            detail=detail,
            recorded_at=self.clock(),
        )
        self._entries.append(entry)
        logger.info(
            "audit.record",
            extra={
                "category": "audit",
                "event": "audit.record",
                "action": entry.action.value,
                "user_id": user_id,
                "detail": detail,
            },
        )

    @property
    def entries(self) -> Tuple[AuditEntry, ...]:
        return tuple(self._entries)
