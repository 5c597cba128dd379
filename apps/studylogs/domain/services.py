# apps/studylogs/domain/services.py
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services import ProgressService
from apps.studylogs.domain.entities import StudyLogEntity


class StudyLogRejected(ValueError):
    """Wpis odrzucony przez reguły dziennika (komunikat dla użytkownika)."""


def latest_log(logs: Sequence[StudyLogEntity]) -> Optional[StudyLogEntity]:
    """Najnowszy wpis wg created_at (przy remisie wyższe ID)."""
    if not logs:
        return None
    if any(log.created_at is None for log in logs):
        # Bez kompletu znaczników czasu kolejność daje samo ID
        return max(logs, key=lambda log: log.id or 0)
    return max(logs, key=lambda log: (log.created_at, log.id or 0))


def last_notes(logs: Sequence[StudyLogEntity]) -> str:
    latest = latest_log(logs)
    return (latest.notes or "") if latest else ""


def _fmt_hours(minutes: float) -> str:
    return f"{minutes / 60:g}"


@dataclass
class StudyLogDraft:
    """Dane z formularza wpisu."""
    hours: Optional[float] = None
    notes: str = ""
    completed_task_ids: List[int] = field(default_factory=list)


class StudyLogPolicy:
    """Reguły przyjęcia wpisu do dziennika. Zwraca gotową encję albo rzuca StudyLogRejected."""

    def __init__(self, progress: Optional[ProgressService] = None):
        self.progress = progress or ProgressService()

    def build(self, goal: GoalEntity, draft: StudyLogDraft, previous_notes: str,
              user_id: int, now: Optional[datetime] = None) -> StudyLogEntity:
        notes = draft.notes or ""
        notes_changed = notes.strip() != (previous_notes or "").strip()

        log = StudyLogEntity(
            id=None,
            goal_id=goal.id,
            user_id=user_id,
            log_type=goal.goal_type,
            notes=notes,
            created_at=now,
        )

        if goal.is_time_based:
            log.logged_time = self._check_time(goal, draft.hours, notes_changed)
        else:
            log.completed_task_ids = self._check_tasks(goal, draft.completed_task_ids, notes_changed)

        return log

    def _check_time(self, goal: GoalEntity, hours: Optional[float], notes_changed: bool) -> Optional[int]:
        if hours is not None and (not math.isfinite(hours) or hours <= 0):
            raise StudyLogRejected("Please enter a positive number of hours.")

        new_minutes = int(round(hours * 60)) if hours else 0
        remaining = self.progress.remaining_minutes(goal)

        if new_minutes > remaining:
            raise StudyLogRejected(
                f"Logging {_fmt_hours(new_minutes)} hrs exceeds the remaining {_fmt_hours(remaining)} hrs."
            )
        if new_minutes == 0 and not notes_changed:
            raise StudyLogRejected("No changes to log.")

        return new_minutes or None

    def _check_tasks(self, goal: GoalEntity, checked_ids: Iterable[int], notes_changed: bool) -> List[int]:
        # Tylko zadania tego celu
        valid_ids = {t.id for t in goal.tasks}
        checked = sorted(set(checked_ids) & valid_ids)

        if set(checked) == set(goal.completed_task_ids) and not notes_changed:
            raise StudyLogRejected("No changes to log.")

        return checked
