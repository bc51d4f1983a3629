# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from task_management.config import Settings

_VARS = (
    "TASKS_APP_NAME",
    "TASKS_LOG_LEVEL",
    "TASKS_LOG_DIR",
    "TASKS_LOG_FILE",
    "TASKS_LOG_TO_FILE",
    "TASKS_ACTIVE_USERS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    # .env loading writes straight into os.environ; keep it per-test.
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env(load_env_file=False)

    assert s.app_name == "task-management"
    assert s.log_level == "INFO"
    assert s.log_path == Path("./logs") / "tasks.jsonl"
    assert s.log_to_file is True
    assert s.active_user_ids == frozenset()


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKS_APP_NAME", "todo")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("TASKS_LOG_FILE", "audit.jsonl")
    monkeypatch.setenv("TASKS_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKS_ACTIVE_USERS", "1, 2 3,x,,4")

    s = Settings.from_env(load_env_file=False)

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_path == tmp_path / "audit.jsonl"
    assert s.log_to_file is False
    assert s.active_user_ids == frozenset({1, 2, 3, 4})


def test_dotenv_file_does_not_override_environment(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TASKS_APP_NAME=from-file\nTASKS_ACTIVE_USERS=5\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TASKS_APP_NAME", "from-env")

    s = Settings.from_env()

    assert s.app_name == "from-env"
    assert s.active_user_ids == frozenset({5})
