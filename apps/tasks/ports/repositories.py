# apps/tasks/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Iterable, List
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.domain.services.reconciler import TaskChangeSet


class ITaskRepository(ABC):
    @abstractmethod
    def list_for_goal(self, goal_id: int) -> List[TaskEntity]:
        """Zwraca zadania celu posortowane po ID."""
        pass

    @abstractmethod
    def bulk_insert(self, tasks: List[TaskEntity]) -> List[TaskEntity]:
        """Tworzy nowe zadania i zwraca je z nadanymi ID."""
        pass

    @abstractmethod
    def bulk_delete(self, task_ids: List[int]) -> int:
        pass

    @abstractmethod
    def update_text(self, task: TaskEntity) -> None:
        pass

    @abstractmethod
    def set_completed(self, goal_id: int, completed_ids: Iterable[int]) -> None:
        """Przepisuje flagi is_completed: wszystkie na False, potem podane ID na True."""
        pass

    def apply_changes(self, changes: TaskChangeSet) -> None:
        """Wykonuje paczki z reconcilera. Transakcję zapewnia wywołujący."""
        if changes.to_delete:
            self.bulk_delete(changes.to_delete)
        if changes.to_insert:
            self.bulk_insert(changes.to_insert)
        for task in changes.to_update:
            self.update_text(task)
