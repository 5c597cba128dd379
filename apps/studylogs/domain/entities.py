# apps/studylogs/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from apps.goals.domain.entities import GoalType


@dataclass
class StudyLogEntity:
    id: Optional[int]
    goal_id: int
    user_id: int
    log_type: GoalType
    logged_time: Optional[int] = None  # minuty (tylko TIME)
    completed_task_ids: List[int] = field(default_factory=list)  # tylko TASK
    notes: str = ""
    created_at: Optional[datetime] = None
