# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Union

from apps.tasks.domain.entities import TaskEntity


class GoalType(str, Enum):
    TIME = 'time'
    TASK = 'task'


@dataclass
class GoalEntity:
    id: Optional[int]
    title: str
    subject: str = ""
    goal_type: GoalType = GoalType.TIME

    # Termin to data kalendarzowa; ze źródeł zewnętrznych może przyjść jako tekst ISO
    deadline: Optional[Union[date, datetime, str]] = None

    target_time: Optional[float] = None  # godziny (tylko TIME)
    tasks: List[TaskEntity] = field(default_factory=list)  # tylko TASK

    # Wyliczane z dziennika (suma minut), nie zapisywane w celu
    logged_time: float = 0.0

    user_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_time_based(self) -> bool:
        return self.goal_type == GoalType.TIME

    @property
    def is_task_based(self) -> bool:
        return self.goal_type == GoalType.TASK

    @property
    def completed_task_count(self) -> int:
        return sum(1 for t in self.tasks if t.is_completed)

    @property
    def total_task_count(self) -> int:
        return len(self.tasks)

    @property
    def completed_task_ids(self) -> List[int]:
        return [t.id for t in self.tasks if t.is_completed]
