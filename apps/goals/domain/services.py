# apps/goals/domain/services.py
import logging
import re
from datetime import date, datetime, tzinfo
from typing import Iterable, List, Optional, Union

import pytz
from dateutil.parser import isoparse

from apps.goals.domain.entities import GoalEntity

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]
TimezoneLike = Union[tzinfo, str, None]

# Tylko pełna data RRRR-MM-DD; skrócone formy ISO to brak terminu
FULL_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}(?!\d)")


def resolve_timezone(tz: TimezoneLike) -> Optional[tzinfo]:
    """Nazwa strefy (np. 'Europe/Warsaw') -> tzinfo. Nieznana nazwa -> UTC."""
    if tz is None or isinstance(tz, tzinfo):
        return tz
    try:
        return pytz.timezone(tz)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown time zone %r, falling back to UTC", tz)
        return pytz.UTC


def to_local_date(value: DateLike) -> Optional[date]:
    """
    Normalizuje termin do daty kalendarzowej.

    Termin to dzień wybrany przez użytkownika, a nie moment w czasie:
    bierzemy datę tak, jak została zapisana, ignorując godzinę i offset.
    Niepoprawna wartość = brak terminu.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not FULL_DATE_RE.match(text):
            return None
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError):
            logger.debug("Unparseable deadline %r treated as missing", value)
            return None
    return None


def local_today(now: Union[date, datetime], tz: TimezoneLike = None) -> date:
    """Dzisiejsza data w kalendarzu oglądającego (nie UTC)."""
    if isinstance(now, datetime):
        zone = resolve_timezone(tz)
        if now.tzinfo is not None and zone is not None:
            now = now.astimezone(zone)
        return now.date()
    return now


class ProgressService:
    """Postęp i termin celu. Niczego nie modyfikuje."""

    def progress_ratio(self, goal: GoalEntity) -> float:
        if goal.is_time_based:
            target = goal.target_time or 0
            if target <= 0:
                return 0.0
            return min((goal.logged_time or 0) / (target * 60), 1.0)

        total = goal.total_task_count
        if total <= 0:
            return 0.0
        return min(goal.completed_task_count / total, 1.0)

    def is_complete(self, goal: GoalEntity) -> bool:
        # Pusty cel (0h lub 0 zadań) nigdy nie jest ukończony
        if goal.is_time_based:
            denominator = goal.target_time or 0
        else:
            denominator = goal.total_task_count
        return denominator > 0 and self.progress_ratio(goal) >= 1.0

    def remaining_minutes(self, goal: GoalEntity) -> Optional[float]:
        if not goal.is_time_based:
            return None
        return max((goal.target_time or 0) * 60 - (goal.logged_time or 0), 0)

    def is_due_today(self, goal: GoalEntity, local_now: Union[date, datetime],
                     tz: TimezoneLike = None) -> bool:
        deadline = to_local_date(goal.deadline)
        if deadline is None:
            return False
        return deadline == local_today(local_now, tz)

    def todays_goals(self, goals: Iterable[GoalEntity], local_now: Union[date, datetime],
                     tz: TimezoneLike = None) -> List[GoalEntity]:
        today = local_today(local_now, tz)
        return [g for g in goals if to_local_date(g.deadline) == today]


def sort_by_due_date(goals: Iterable[GoalEntity]) -> List[GoalEntity]:
    """Najbliższy termin pierwszy, cele bez terminu na końcu."""
    return sorted(goals, key=lambda g: (to_local_date(g.deadline) is None,
                                        to_local_date(g.deadline) or date.max))


def sort_by_title(goals: Iterable[GoalEntity]) -> List[GoalEntity]:
    return sorted(goals, key=lambda g: (g.title or "").casefold())
