# apps/goals/application/use_cases.py
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, ContextManager, List, Optional, Union

from django.db import DatabaseError, transaction

from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.domain.services import ProgressService, sort_by_due_date, sort_by_title
from apps.goals.ports.repositories import IGoalRepository
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.domain.services import TaskChangeSet, TaskReconciler
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)

Atomic = Callable[[], ContextManager]


class GoalNotFound(LookupError):
    pass


@dataclass
class CreateGoalInput:
    title: str
    subject: str
    user_id: int
    goal_type: GoalType = GoalType.TIME
    deadline: Optional[date] = None
    target_time: Optional[float] = None  # godziny
    tasks: List[TaskEntity] = field(default_factory=list)


@dataclass
class UpdateGoalInput:
    goal_id: int
    user_id: int
    title: str
    subject: str
    goal_type: GoalType
    deadline: Optional[date] = None
    target_time: Optional[float] = None
    tasks: List[TaskEntity] = field(default_factory=list)  # id=None dla nowych wierszy


@dataclass
class UpdateGoalResult:
    goal: GoalEntity
    changes: TaskChangeSet


class CreateGoalUseCase:
    def __init__(self, goal_repository: IGoalRepository, task_repository: ITaskRepository,
                 atomic: Atomic = transaction.atomic):
        self.goal_repository = goal_repository
        self.task_repository = task_repository
        self.atomic = atomic

    def execute(self, input_dto: CreateGoalInput) -> GoalEntity:
        if not (input_dto.title or "").strip():
            raise ValueError("Goal title cannot be empty")

        goal_type = GoalType(input_dto.goal_type)
        goal = GoalEntity(
            id=None,
            title=input_dto.title.strip(),
            subject=(input_dto.subject or "").strip(),
            goal_type=goal_type,
            deadline=input_dto.deadline,
            target_time=input_dto.target_time if goal_type == GoalType.TIME else None,
        )

        with self.atomic():
            saved = self.goal_repository.save(goal, user_id=input_dto.user_id)
            if goal_type == GoalType.TASK:
                rows = [TaskEntity(id=None, task_text=t.task_text, goal_id=saved.id)
                        for t in input_dto.tasks if t.task_text]
                saved.tasks = self.task_repository.bulk_insert(rows)

        logger.info("Created %s goal %s for user %s", goal_type.value, saved.id, input_dto.user_id)
        return saved


class UpdateGoalUseCase:
    def __init__(self, goal_repository: IGoalRepository, task_repository: ITaskRepository,
                 reconciler: Optional[TaskReconciler] = None, atomic: Atomic = transaction.atomic):
        self.goal_repository = goal_repository
        self.task_repository = task_repository
        self.reconciler = reconciler or TaskReconciler()
        self.atomic = atomic

    def execute(self, input_dto: UpdateGoalInput) -> UpdateGoalResult:
        current = self.goal_repository.get_by_id(input_dto.goal_id, input_dto.user_id)
        if current is None:
            raise GoalNotFound(f"Goal {input_dto.goal_id} not found")

        if GoalType(input_dto.goal_type) != current.goal_type:
            raise ValueError("Goal type cannot be changed")
        if not (input_dto.title or "").strip():
            raise ValueError("Goal title cannot be empty")

        current.title = input_dto.title.strip()
        current.subject = (input_dto.subject or "").strip()
        current.deadline = input_dto.deadline
        if current.is_time_based:
            current.target_time = input_dto.target_time

        changes = TaskChangeSet()
        try:
            # Snapshot zadań i zapis zmian w jednej transakcji
            with self.atomic():
                self.goal_repository.save(current)
                if current.is_task_based:
                    existing = self.task_repository.list_for_goal(current.id)
                    changes = self.reconciler.reconcile(current.id, existing, input_dto.tasks)
                    self.task_repository.apply_changes(changes)
        except DatabaseError:
            logger.exception("Saving goal %s failed, nothing was applied", current.id)
            raise

        logger.info("Updated goal %s, tasks: %s", current.id, changes.summary())
        goal = self.goal_repository.get_by_id(current.id, input_dto.user_id)
        return UpdateGoalResult(goal=goal, changes=changes)


class DeleteGoalUseCase:
    def __init__(self, goal_repository: IGoalRepository):
        self.goal_repository = goal_repository

    def execute(self, goal_id: int, user_id: int) -> None:
        if not self.goal_repository.delete(goal_id, user_id):
            raise GoalNotFound(f"Goal {goal_id} not found")
        logger.info("Deleted goal %s of user %s", goal_id, user_id)


@dataclass
class GoalCard:
    """Cel gotowy do wyświetlenia na dashboardzie."""
    goal: GoalEntity
    progress: float
    is_complete: bool

    @property
    def percent(self) -> int:
        return int(round(self.progress * 100))


@dataclass
class GoalDashboard:
    goals: List[GoalCard]
    todays_goals: List[GoalCard]
    sort: str


class GoalDashboardUseCase:
    SORTS = {
        'due': sort_by_due_date,
        'title': sort_by_title,
    }

    def __init__(self, goal_repository: IGoalRepository, progress: Optional[ProgressService] = None):
        self.goal_repository = goal_repository
        self.progress = progress or ProgressService()

    def execute(self, user_id: int, local_now: Union[date, datetime], sort: str = 'due',
                tz=None) -> GoalDashboard:
        if sort not in self.SORTS:
            sort = 'due'

        goals = self.SORTS[sort](self.goal_repository.list_for_user(user_id))
        cards = [self._card(g) for g in goals]

        return GoalDashboard(
            goals=cards,
            todays_goals=[c for c in cards if self.progress.is_due_today(c.goal, local_now, tz)],
            sort=sort,
        )

    def _card(self, goal: GoalEntity) -> GoalCard:
        return GoalCard(
            goal=goal,
            progress=self.progress.progress_ratio(goal),
            is_complete=self.progress.is_complete(goal),
        )
