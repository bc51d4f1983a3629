# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_management.config import Settings
from task_management.observability.logging import JsonFormatter
from task_management.services.task_service import TaskService

from fakes import (
    NOW,
    CallJournal,
    FakeAuditLog,
    FakeClock,
    FakeNotifier,
    FakeTaskStore,
    FakeUserDirectory,
)


@pytest.fixture()
def journal() -> CallJournal:
    return CallJournal()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def store(journal: CallJournal) -> FakeTaskStore:
    return FakeTaskStore(journal)


@pytest.fixture()
def users(journal: CallJournal) -> FakeUserDirectory:
    return FakeUserDirectory(journal, active={1})


@pytest.fixture()
def service(journal, store, users, clock) -> TaskService:
    return TaskService(store, users, FakeNotifier(journal), FakeAuditLog(journal), clock=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing logs at the per-test tmp dir."""
    return Settings(
        app_name="tasks-test",
        log_level="INFO",
        log_dir=tmp_path / "logs",
        log_file="tasks.jsonl",
        log_to_file=True,
        active_user_ids=frozenset({1, 2}),
    )


@pytest.fixture()
def restore_root_logging():
    """Drop the JSON handlers installed by setup_logging once the test is done."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, JsonFormatter):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
