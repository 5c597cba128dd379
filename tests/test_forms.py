"""GoalForm, task row parsing and StudyLogForm."""

from datetime import date

from django.http import QueryDict

from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.forms import GoalForm, parse_task_rows
from apps.studylogs.forms import StudyLogForm
from apps.tasks.domain.entities import TaskEntity


def _post(**lists):
    data = QueryDict(mutable=True)
    for key, values in lists.items():
        data.setlist(key, values if isinstance(values, list) else [values])
    return data


class TestParseTaskRows:
    def test_trims_and_drops_blank_rows(self):
        rows = parse_task_rows(_post(task_id=["4", "", ""], task_text=[" Cells ", "  ", "Genetics"]))
        assert [(r.id, r.task_text) for r in rows] == [(4, "Cells"), (None, "Genetics")]

    def test_garbage_id_becomes_new_row(self):
        rows = parse_task_rows(_post(task_id=["abc"], task_text=["Cells"]))
        assert rows[0].id is None

    def test_missing_ids_column(self):
        rows = parse_task_rows(_post(task_text=["Cells", "Genetics"]))
        assert [r.id for r in rows] == [None, None]


class TestGoalForm:
    BASE = {'title': "Calculus", 'subject': "Math", 'deadline': "2024-03-15"}

    def test_time_goal_needs_positive_target(self):
        form = GoalForm({**self.BASE, 'goal_type': 'time', 'target_time': "0"})
        assert not form.is_valid()
        assert form.errors['target_time'] == ["Please set a positive number of target hours."]

    def test_task_goal_needs_a_task(self):
        form = GoalForm({**self.BASE, 'goal_type': 'task'}, tasks=[])
        assert not form.is_valid()
        assert form.non_field_errors() == ["Please add at least one task."]

    def test_create_input_drops_fields_of_other_type(self):
        tasks = [TaskEntity(id=None, task_text="Limits")]
        form = GoalForm({**self.BASE, 'goal_type': 'time', 'target_time': "12.5"}, tasks=tasks)
        assert form.is_valid(), form.errors

        data = form.to_create_input(user_id=7)
        assert data.goal_type == GoalType.TIME
        assert data.target_time == 12.5
        assert data.tasks == []
        assert data.deadline == date(2024, 3, 15)
        assert data.user_id == 7

    def test_edit_disables_goal_type(self):
        goal = GoalEntity(id=3, title="Calculus", subject="Math", goal_type=GoalType.TIME,
                          deadline=date(2024, 3, 15), target_time=10.0)
        form = GoalForm({**self.BASE, 'goal_type': 'task', 'target_time': "4"},
                        is_edit=True, initial=GoalForm.initial_from(goal))
        assert form.fields['goal_type'].disabled
        assert form.is_valid(), form.errors

        data = form.to_update_input(goal_id=3, user_id=7)
        assert data.goal_type == GoalType.TIME
        assert data.target_time == 4.0


class TestStudyLogForm:
    def test_time_goal_has_no_task_checkboxes(self):
        goal = GoalEntity(id=1, title="Calculus", goal_type=GoalType.TIME, target_time=2.0)
        form = StudyLogForm(goal, {'hours': "0.75", 'notes': " keep spacing "})
        assert 'completed_tasks' not in form.fields
        assert form.is_valid(), form.errors

        data = form.to_input(user_id=7)
        assert data.hours == 0.75
        assert data.notes == " keep spacing "
        assert data.completed_task_ids == []

    def test_task_goal_offers_only_its_tasks(self):
        goal = GoalEntity(id=1, title="Biology", goal_type=GoalType.TASK,
                          tasks=[TaskEntity(id=10, task_text="Cells"), TaskEntity(id=11, task_text="Genetics")])
        assert not StudyLogForm(goal, _post(completed_tasks=["99"])).is_valid()

        form = StudyLogForm(goal, _post(completed_tasks=["11"]))
        assert 'hours' not in form.fields
        assert form.is_valid(), form.errors
        assert form.to_input(user_id=7).completed_task_ids == [11]
