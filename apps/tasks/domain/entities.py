# apps/tasks/domain/entities.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class TaskEntity:
    id: Optional[int]  # None = zadanie jeszcze niezapisane
    task_text: str
    is_completed: bool = False

    # Relacje (tylko ID, żeby nie wiązać obiektów domenowych z ORM)
    goal_id: Optional[int] = None

    @property
    def is_new(self) -> bool:
        return self.id is None
