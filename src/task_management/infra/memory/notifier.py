import logging

logger = logging.getLogger("task_management.notify")


class LoggingNotifier:
    """Notifier that only emits structured log records; delivery lives elsewhere."""

    def notify_created(self, user_id: int, title: str) -> None:
        logger.info(
            "task.created",
            extra={"category": "notify", "event": "task.created", "user_id": user_id, "title": title},
        )

    def notify_completed(self, user_id: int, title: str) -> None:
        logger.info(
            "task.completed",
            extra={"category": "notify", "event": "task.completed", "user_id": user_id, "title": title},
        )
