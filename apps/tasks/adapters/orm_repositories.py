# apps/tasks/adapters/orm_repositories.py
from typing import Iterable, List
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.ports.repositories import ITaskRepository
from apps.tasks.models import Task as TaskModel


class DjangoTaskRepository(ITaskRepository):
    def to_entity(self, model: TaskModel) -> TaskEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return TaskEntity(
            id=model.id,
            task_text=model.task_text,
            is_completed=model.is_completed,
            goal_id=model.goal_id,
        )

    def list_for_goal(self, goal_id: int) -> List[TaskEntity]:
        qs = TaskModel.objects.filter(goal_id=goal_id).order_by('id')
        return [self.to_entity(t) for t in qs]

    def bulk_insert(self, tasks: List[TaskEntity]) -> List[TaskEntity]:
        if not tasks:
            return []
        for task in tasks:
            if task.goal_id is None:
                raise ValueError("goal_id is required for creating a new task")

        objs = TaskModel.objects.bulk_create([
            TaskModel(goal_id=t.goal_id, task_text=t.task_text) for t in tasks
        ])
        # ID z bulk_create tylko na bazach z RETURNING (SQLite 3.35+, Postgres)
        return [self.to_entity(obj) for obj in objs]

    def bulk_delete(self, task_ids: List[int]) -> int:
        if not task_ids:
            return 0
        deleted, _ = TaskModel.objects.filter(id__in=task_ids).delete()
        return deleted

    def update_text(self, task: TaskEntity) -> None:
        TaskModel.objects.filter(id=task.id).update(task_text=task.task_text)

    def set_completed(self, goal_id: int, completed_ids: Iterable[int]) -> None:
        ids = list(completed_ids)
        TaskModel.objects.filter(goal_id=goal_id).update(is_completed=False)
        if ids:
            TaskModel.objects.filter(goal_id=goal_id, id__in=ids).update(is_completed=True)
