from __future__ import annotations


class TaskServiceError(Exception):
    """Base class for errors raised by TaskService."""


class InvalidStateError(TaskServiceError):
    """The caller is not allowed to act right now (e.g. inactive user)."""


class InvalidArgumentError(TaskServiceError, ValueError):
    """Malformed input: blank title, non-future deadline, unknown priority."""
