"""Unit tests for progress ratio, completion and "due today" resolution."""

from datetime import date, datetime, timedelta, timezone

import pytest
import pytz

from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.domain.services import (
    ProgressService, local_today, resolve_timezone, sort_by_due_date, sort_by_title, to_local_date,
)
from apps.tasks.domain.entities import TaskEntity


@pytest.fixture
def progress():
    return ProgressService()


def time_goal(target_hours, logged_minutes, **kwargs):
    return GoalEntity(id=1, title="Calculus", goal_type=GoalType.TIME,
                      target_time=target_hours, logged_time=logged_minutes, **kwargs)


def task_goal(total, completed, **kwargs):
    tasks = [TaskEntity(id=i + 1, task_text=f"T{i}", is_completed=i < completed) for i in range(total)]
    return GoalEntity(id=2, title="Biology", goal_type=GoalType.TASK, tasks=tasks, **kwargs)


class TestProgressRatio:
    def test_time_goal_exactly_reached(self, progress):
        goal = time_goal(10, 600)
        assert progress.progress_ratio(goal) == 1.0
        assert progress.is_complete(goal)

    def test_time_goal_partial(self, progress):
        goal = time_goal(2, 30)
        assert progress.progress_ratio(goal) == pytest.approx(0.25)
        assert not progress.is_complete(goal)

    def test_time_goal_overshoot_is_capped(self, progress):
        goal = time_goal(1, 10_000)
        assert progress.progress_ratio(goal) == 1.0

    @pytest.mark.parametrize("target", [0, None])
    def test_time_goal_without_target(self, progress, target):
        goal = time_goal(target, 0)
        assert progress.progress_ratio(goal) == 0
        assert not progress.is_complete(goal)

    def test_task_goal_all_done(self, progress):
        goal = task_goal(3, 3)
        assert progress.progress_ratio(goal) == 1.0
        assert progress.is_complete(goal)

    def test_task_goal_some_done(self, progress):
        goal = task_goal(4, 1)
        assert progress.progress_ratio(goal) == pytest.approx(0.25)
        assert not progress.is_complete(goal)

    def test_task_goal_without_tasks(self, progress):
        goal = task_goal(0, 0)
        assert progress.progress_ratio(goal) == 0
        assert not progress.is_complete(goal)

    @pytest.mark.parametrize("target,logged", [(1, 0), (1, 59), (0.5, 45), (100, 1), (3, 1e9)])
    def test_ratio_always_in_unit_interval(self, progress, target, logged):
        assert 0.0 <= progress.progress_ratio(time_goal(target, logged)) <= 1.0


class TestRemainingMinutes:
    def test_time_goal(self, progress):
        assert progress.remaining_minutes(time_goal(2, 30)) == 90

    def test_never_negative(self, progress):
        assert progress.remaining_minutes(time_goal(1, 500)) == 0

    def test_task_goal_has_none(self, progress):
        assert progress.remaining_minutes(task_goal(2, 1)) is None


class TestToLocalDate:
    @pytest.mark.parametrize("value,expected", [
        ("2024-03-15", date(2024, 3, 15)),
        ("2024-03-15T23:00:00Z", date(2024, 3, 15)),
        ("2024-03-15T00:30:00+09:00", date(2024, 3, 15)),
        (date(2024, 3, 15), date(2024, 3, 15)),
        (datetime(2024, 3, 15, 23, 59), date(2024, 3, 15)),
    ])
    def test_keeps_calendar_date_as_written(self, value, expected):
        assert to_local_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2024-13-45", 12345])
    def test_missing_or_malformed_is_none(self, value):
        assert to_local_date(value) is None

    @pytest.mark.parametrize("value", ["2024", "2024-03", "202403", "2024-W11", "2024-W11-1", "2024-075"])
    def test_reduced_precision_is_no_deadline(self, value):
        assert to_local_date(value) is None

    def test_leading_whitespace_is_trimmed(self):
        assert to_local_date("  2024-03-15 ") == date(2024, 3, 15)


class TestLocalToday:
    def test_aware_now_converted_to_viewer_zone(self):
        now = datetime(2024, 3, 16, 1, 0, tzinfo=timezone.utc)
        assert local_today(now, "Etc/GMT+5") == date(2024, 3, 15)  # UTC-5
        assert local_today(now, "UTC") == date(2024, 3, 16)

    def test_naive_now_is_taken_as_local(self):
        assert local_today(datetime(2024, 3, 15, 23, 59), "Asia/Tokyo") == date(2024, 3, 15)

    def test_plain_date_passes_through(self):
        assert local_today(date(2024, 3, 15)) == date(2024, 3, 15)

    def test_unknown_zone_falls_back_to_utc(self):
        assert resolve_timezone("Mars/Olympus") is pytz.UTC


class TestDueToday:
    def test_no_deadline_never_due(self, progress):
        assert not progress.is_due_today(time_goal(1, 0, deadline=None), date(2024, 3, 15))

    def test_malformed_deadline_never_due(self, progress):
        assert not progress.is_due_today(time_goal(1, 0, deadline="soon"), date(2024, 3, 15))

    def test_late_utc_deadline_seen_from_utc_minus_5(self, progress):
        goal = time_goal(1, 0, deadline="2024-03-15T23:00:00Z")
        # 01:00 UTC on the 16th is still the 15th in UTC-5
        now = datetime(2024, 3, 16, 1, 0, tzinfo=timezone.utc)
        assert progress.is_due_today(goal, now, tz="Etc/GMT+5")
        assert not progress.is_due_today(goal, now, tz="UTC")

    def test_plain_date_deadline(self, progress):
        goal = task_goal(1, 0, deadline=date(2024, 3, 15))
        assert progress.is_due_today(goal, date(2024, 3, 15))
        assert not progress.is_due_today(goal, date(2024, 3, 14))

    def test_todays_goals_keeps_order(self, progress):
        today = date(2024, 3, 15)
        goals = [
            time_goal(1, 0, deadline="2024-03-15"),
            time_goal(1, 0, deadline=today + timedelta(days=1)),
            task_goal(1, 0, deadline=today),
            task_goal(1, 0, deadline=None),
        ]
        assert progress.todays_goals(goals, today) == [goals[0], goals[2]]


class TestSorting:
    def test_by_due_date_missing_last(self):
        a = GoalEntity(id=1, title="a", deadline=None)
        b = GoalEntity(id=2, title="b", deadline="2024-05-01")
        c = GoalEntity(id=3, title="c", deadline=date(2024, 4, 1))
        assert [g.id for g in sort_by_due_date([a, b, c])] == [3, 2, 1]

    def test_by_title_case_insensitive(self):
        goals = [GoalEntity(id=1, title="physics"), GoalEntity(id=2, title="Algebra"),
                 GoalEntity(id=3, title="biology")]
        assert [g.title for g in sort_by_title(goals)] == ["Algebra", "biology", "physics"]
