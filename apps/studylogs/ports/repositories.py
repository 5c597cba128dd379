# apps/studylogs/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List
from apps.studylogs.domain.entities import StudyLogEntity


class IStudyLogRepository(ABC):
    @abstractmethod
    def list_for_goal(self, goal_id: int, user_id: int) -> List[StudyLogEntity]:
        """Wpisy celu, najnowsze pierwsze."""
        pass

    @abstractmethod
    def add(self, log: StudyLogEntity) -> StudyLogEntity:
        """Dopisuje wpis (brak update/delete - dziennik jest append-only)."""
        pass
