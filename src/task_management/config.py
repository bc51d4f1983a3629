"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKS"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_user_ids(name: str) -> FrozenSet[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return frozenset()
    ids = set()
    for part in raw.replace(",", " ").split():
        try:
            ids.add(int(part))
        except ValueError:
            continue
    return frozenset(ids)


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str
    log_level: str
    log_dir: Path
    log_file: str
    log_to_file: bool
    active_user_ids: FrozenSet[int]

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "task-management"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_dir=_env_path(_k("LOG_DIR"), Path("./logs")),
            log_file=_env(_k("LOG_FILE"), "tasks.jsonl"),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            active_user_ids=_env_user_ids(_k("ACTIVE_USERS")),
        )


def get_settings() -> Settings:
    return Settings.from_env()
