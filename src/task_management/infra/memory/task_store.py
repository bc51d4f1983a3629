from __future__ import annotations
from typing import Dict, List, Optional

from task_management.domain.task_models import TaskItem


class InMemoryTaskStore:
    """
    Dict-backed TaskStore.
    Hands out the stored instances themselves, so callers mutate and re-save in place.
    """
    def __init__(self, tasks: Optional[List[TaskItem]] = None):
        self._tasks: Dict[int, TaskItem] = {}
        for task in tasks or []:
            self.save(task)

    def find_task(self, task_id: int) -> Optional[TaskItem]:
        return self._tasks.get(task_id)

    def get_user_tasks(self, user_id: int) -> List[TaskItem]:
        # insertion order; re-saving an existing id keeps its slot
        return [t for t in self._tasks.values() if t.user_id == user_id]

    def save(self, task: TaskItem) -> None:
        self._tasks[task.id] = task

    def delete(self, task_id: int) -> None:
        self._tasks.pop(task_id, None)

    def __len__(self) -> int:
        return len(self._tasks)
