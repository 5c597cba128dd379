# apps/tasks/domain/services/reconciler.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from apps.tasks.domain.entities import TaskEntity


@dataclass
class TaskChangeSet:
    """Trzy rozłączne paczki operacji dla repozytorium zadań."""
    to_insert: List[TaskEntity] = field(default_factory=list)
    to_update: List[TaskEntity] = field(default_factory=list)
    to_delete: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.to_insert or self.to_update or self.to_delete)

    def summary(self) -> dict:
        return {
            'inserted': len(self.to_insert),
            'updated': len(self.to_update),
            'deleted': len(self.to_delete),
        }


class TaskReconciler:
    """
    Porównuje zapisaną listę zadań celu z listą z formularza edycji.

    Zakłada, że puste wiersze zostały już odfiltrowane, a teksty przycięte
    (robi to formularz). Nie stosuje reguły minimalnej liczby zadań.
    """

    def reconcile(
        self,
        goal_id: Optional[int],
        existing: Sequence[TaskEntity],
        incoming: Sequence[TaskEntity],
    ) -> TaskChangeSet:
        # 1. Mapa: id zapisanego zadania -> tekst
        persisted: Dict[int, str] = {t.id: t.task_text for t in existing}

        changes = TaskChangeSet()
        kept_ids: Set[int] = set()

        for task in incoming:
            # ID spoza tego celu traktujemy jak nowy wiersz (nie nadpisujemy cudzych zadań)
            if task.is_new or task.id not in persisted:
                changes.to_insert.append(
                    TaskEntity(id=None, task_text=task.task_text, goal_id=goal_id)
                )
                continue

            if task.id in kept_ids:
                continue  # duplikat ID, liczy się pierwsze wystąpienie
            kept_ids.add(task.id)

            if persisted[task.id] != task.task_text:
                changes.to_update.append(
                    TaskEntity(id=task.id, task_text=task.task_text, goal_id=goal_id)
                )

        # 2. Usunięte z formularza
        changes.to_delete = [t.id for t in existing if t.id not in kept_ids]

        return changes
