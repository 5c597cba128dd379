# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from apps.goals.domain.entities import GoalEntity


class IGoalRepository(ABC):
    @abstractmethod
    def get_by_id(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        """Cel użytkownika razem z zadaniami i sumą zalogowanych minut."""
        pass

    @abstractmethod
    def list_for_user(self, user_id: int) -> List[GoalEntity]:
        pass

    @abstractmethod
    def save(self, goal: GoalEntity, user_id: Optional[int] = None) -> GoalEntity:
        """Zapisuje (tworzy lub aktualizuje) pola celu, bez zadań."""
        pass

    @abstractmethod
    def delete(self, goal_id: int, user_id: int) -> bool:
        pass
