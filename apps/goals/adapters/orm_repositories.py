# apps/goals/adapters/orm_repositories.py
from typing import List, Optional
from django.db.models import IntegerField, Sum, Value
from django.db.models.functions import Coalesce
from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.domain.services import to_local_date
from apps.goals.ports.repositories import IGoalRepository
from apps.goals.models import Goal as GoalModel
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository


class DjangoGoalRepository(IGoalRepository):
    def __init__(self):
        self.task_repo = DjangoTaskRepository()

    def queryset(self):
        # logged_time liczymy w bazie; zadania jednym dodatkowym zapytaniem
        return GoalModel.objects.annotate(
            logged_total=Coalesce(Sum('study_logs__logged_time'), Value(0), output_field=IntegerField())
        ).prefetch_related('tasks')

    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.id,
            title=model.title,
            subject=model.subject,
            goal_type=GoalType(model.goal_type),
            deadline=model.deadline,
            target_time=float(model.target_time) if model.target_time is not None else None,
            tasks=[self.task_repo.to_entity(t) for t in model.tasks.all()],
            logged_time=float(getattr(model, 'logged_total', 0) or 0),
            user_id=model.user_id,
            created_at=model.created_at,
        )

    def get_by_id(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        try:
            goal = self.queryset().get(id=goal_id, user_id=user_id)
            return self.to_entity(goal)
        except GoalModel.DoesNotExist:
            return None

    def list_for_user(self, user_id: int) -> List[GoalEntity]:
        qs = self.queryset().filter(user_id=user_id).order_by('-created_at')
        return [self.to_entity(g) for g in qs]

    def save(self, goal: GoalEntity, user_id: Optional[int] = None) -> GoalEntity:
        data = {
            'title': goal.title,
            'subject': goal.subject,
            'goal_type': goal.goal_type.value,
            'deadline': to_local_date(goal.deadline),
            'target_time': goal.target_time if goal.goal_type == GoalType.TIME else None,
        }

        if goal.id:
            # Aktualizacja istniejącego
            GoalModel.objects.filter(id=goal.id).update(**data)
            obj = self.queryset().get(id=goal.id)
        else:
            # Tworzenie nowego (wymaga user_id)
            if user_id is None:
                raise ValueError("user_id is required for creating a new goal")
            created = GoalModel.objects.create(user_id=user_id, **data)
            obj = self.queryset().get(id=created.id)

        return self.to_entity(obj)

    def delete(self, goal_id: int, user_id: int) -> bool:
        # Zadania i wpisy dziennika lecą kaskadowo
        deleted, _ = GoalModel.objects.filter(id=goal_id, user_id=user_id).delete()
        return deleted > 0
