# apps/studylogs/application/use_cases.py
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from django.db import DatabaseError, transaction

from apps.goals.application.use_cases import Atomic, GoalNotFound
from apps.goals.ports.repositories import IGoalRepository
from apps.studylogs.domain.entities import StudyLogEntity
from apps.studylogs.domain.services import (
    StudyLogDraft, StudyLogPolicy, StudyLogRejected, last_notes,
)
from apps.studylogs.ports.repositories import IStudyLogRepository
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


@dataclass
class LogStudyInput:
    goal_id: int
    user_id: int
    hours: Optional[float] = None
    notes: str = ""
    completed_task_ids: List[int] = field(default_factory=list)


class LogStudyUseCase:
    """
    Dopisuje wpis do dziennika nauki.

    Dla celów zadaniowych w tej samej transakcji przepisuje Task.is_completed,
    żeby projekcja zawsze zgadzała się z ostatnim wpisem.
    """

    def __init__(self, goal_repository: IGoalRepository, log_repository: IStudyLogRepository,
                 task_repository: ITaskRepository, policy: Optional[StudyLogPolicy] = None,
                 atomic: Atomic = transaction.atomic):
        self.goal_repository = goal_repository
        self.log_repository = log_repository
        self.task_repository = task_repository
        self.policy = policy or StudyLogPolicy()
        self.atomic = atomic

    def execute(self, input_dto: LogStudyInput, now: Optional[datetime] = None) -> StudyLogEntity:
        goal = self.goal_repository.get_by_id(input_dto.goal_id, input_dto.user_id)
        if goal is None:
            raise GoalNotFound(f"Goal {input_dto.goal_id} not found")

        history = self.log_repository.list_for_goal(goal.id, input_dto.user_id)
        draft = StudyLogDraft(
            hours=input_dto.hours,
            notes=input_dto.notes,
            completed_task_ids=list(input_dto.completed_task_ids),
        )

        try:
            log = self.policy.build(goal, draft, last_notes(history), input_dto.user_id, now=now)
        except StudyLogRejected as e:
            logger.info("Study log for goal %s rejected: %s", goal.id, e)
            raise

        try:
            with self.atomic():
                saved = self.log_repository.add(log)
                if goal.is_task_based:
                    self.task_repository.set_completed(goal.id, saved.completed_task_ids)
        except DatabaseError:
            logger.exception("Saving study log for goal %s failed", goal.id)
            raise

        logger.info("Logged study for goal %s (%s min, %d tasks done)",
                    goal.id, saved.logged_time or 0, len(saved.completed_task_ids))
        return saved
