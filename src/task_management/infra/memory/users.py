from __future__ import annotations
from typing import Iterable, Optional, Set


class StaticUserDirectory:
    """UserDirectory over a fixed set of active user ids."""

    def __init__(self, active_user_ids: Optional[Iterable[int]] = None):
        self._active: Set[int] = set(active_user_ids or ())

    def is_active_user(self, user_id: int) -> bool:
        return user_id in self._active

    def activate(self, user_id: int) -> None:
        self._active.add(user_id)

    def deactivate(self, user_id: int) -> None:
        self._active.discard(user_id)
