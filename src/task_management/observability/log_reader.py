from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

MAX_TAIL = 5000


def _tail_lines(path: Path, n: int) -> list[str]:
    text = path.read_text(encoding="utf-8", errors="replace")
    lines = text.splitlines()
    return lines[-n:] if n > 0 else lines


def _matches(obj: dict, category: Optional[str], level: Optional[str], q: Optional[str]) -> bool:
    if category and obj.get("category") != category:
        return False
    if level and str(obj.get("level", "")).upper() != level.upper():
        return False
    if q and q.lower() not in json.dumps(obj, ensure_ascii=False).lower():
        return False
    return True


def read_log_entries(
    path: Path,
    tail: int = 300,
    category: Optional[str] = None,
    level: Optional[str] = None,
    q: Optional[str] = None,
) -> list[dict[str, Any]]:
    """
    Parse the last `tail` lines of a JSONL log and filter them.

    Lines that are not JSON objects are skipped. Raises FileNotFoundError
    when the log does not exist yet.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {path}")

    tail = max(1, min(tail, MAX_TAIL))

    items = []
    for line in _tail_lines(path, tail):
        try:
            obj = json.loads(line)
        except json.JSONDecodeError:
            continue
        if not isinstance(obj, dict):
            continue
        if _matches(obj, category, level, q):
            items.append(obj)
    return items
