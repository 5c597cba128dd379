# apps/studylogs/adapters/orm_repositories.py
from typing import List
from django.utils import timezone
from apps.goals.domain.entities import GoalType
from apps.studylogs.domain.entities import StudyLogEntity
from apps.studylogs.ports.repositories import IStudyLogRepository
from apps.studylogs.models import StudyLog as StudyLogModel


class DjangoStudyLogRepository(IStudyLogRepository):
    def to_entity(self, model: StudyLogModel) -> StudyLogEntity:
        return StudyLogEntity(
            id=model.id,
            goal_id=model.goal_id,
            user_id=model.user_id,
            log_type=GoalType(model.log_type),
            logged_time=model.logged_time,
            completed_task_ids=list(model.completed_task_ids or []),
            notes=model.notes,
            created_at=model.created_at,
        )

    def list_for_goal(self, goal_id: int, user_id: int) -> List[StudyLogEntity]:
        qs = StudyLogModel.objects.filter(goal_id=goal_id, user_id=user_id).order_by('-created_at', '-id')
        return [self.to_entity(log) for log in qs]

    def add(self, log: StudyLogEntity) -> StudyLogEntity:
        obj = StudyLogModel.objects.create(
            goal_id=log.goal_id,
            user_id=log.user_id,
            log_type=log.log_type.value,
            logged_time=log.logged_time,
            completed_task_ids=list(log.completed_task_ids),
            notes=log.notes,
            created_at=log.created_at or timezone.now(),
        )
        return self.to_entity(obj)
