from django import forms
from .models import Goal
from apps.goals.domain.entities import GoalEntity, GoalType
from apps.goals.application.use_cases import CreateGoalInput, UpdateGoalInput
from apps.tasks.domain.entities import TaskEntity


def parse_task_rows(data) -> list:
    """
    Wiersze zadań z POST (równoległe listy task_id / task_text).
    Przycina teksty i wyrzuca puste wiersze, zanim trafią do reconcilera.
    """
    ids = data.getlist('task_id')
    texts = data.getlist('task_text')

    rows = []
    for index, text in enumerate(texts):
        text = (text or "").strip()
        if not text:
            continue
        raw_id = ids[index] if index < len(ids) else ""
        try:
            task_id = int(raw_id) if raw_id else None
        except ValueError:
            task_id = None  # śmieci z formularza = nowy wiersz
        rows.append(TaskEntity(id=task_id, task_text=text))
    return rows


class GoalForm(forms.Form):
    title = forms.CharField(
        max_length=200,
        error_messages={'required': "Please enter a goal title."},
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. Finish Chapter 5'}),
    )
    subject = forms.CharField(
        max_length=200,
        error_messages={'required': "Please enter a subject."},
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. Math, Biology'}),
    )
    deadline = forms.DateField(
        error_messages={'required': "Please select a deadline."},
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )
    goal_type = forms.ChoiceField(
        choices=Goal.GoalTypeChoices.choices,
        initial=Goal.GoalTypeChoices.TIME,
        widget=forms.RadioSelect,
    )
    target_time = forms.DecimalField(
        required=False, max_digits=6, decimal_places=2,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': 0.5, 'placeholder': 'e.g. 12'}),
    )

    def __init__(self, *args, tasks=None, is_edit=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.is_edit = is_edit
        self.tasks = tasks if tasks is not None else []
        if is_edit:
            # Typu celu nie da się zmienić po utworzeniu
            self.fields['goal_type'].disabled = True

    @classmethod
    def initial_from(cls, goal: GoalEntity) -> dict:
        return {
            'title': goal.title,
            'subject': goal.subject,
            'deadline': goal.deadline,
            'goal_type': goal.goal_type.value,
            'target_time': goal.target_time,
        }

    @classmethod
    def initial_from_data(cls, data, base=None) -> dict:
        """Wartości z POST bez walidacji (przycisk "+ Add Task" niczego nie zapisuje)."""
        initial = dict(base or {})
        initial.update({name: data.get(name) for name in cls.base_fields if name in data})
        return initial

    def clean(self):
        cleaned = super().clean()
        goal_type = cleaned.get('goal_type')

        if goal_type == GoalType.TIME.value:
            hours = cleaned.get('target_time')
            if hours is None or hours <= 0:
                self.add_error('target_time', "Please set a positive number of target hours.")
        elif goal_type == GoalType.TASK.value:
            if not self.tasks:
                raise forms.ValidationError("Please add at least one task.")
        return cleaned

    def _common(self) -> dict:
        data = self.cleaned_data
        goal_type = GoalType(data['goal_type'])
        hours = data.get('target_time')
        return {
            'title': data['title'],
            'subject': data['subject'],
            'goal_type': goal_type,
            'deadline': data['deadline'],
            'target_time': float(hours) if goal_type == GoalType.TIME and hours is not None else None,
            'tasks': list(self.tasks) if goal_type == GoalType.TASK else [],
        }

    def to_create_input(self, user_id: int) -> CreateGoalInput:
        return CreateGoalInput(user_id=user_id, **self._common())

    def to_update_input(self, goal_id: int, user_id: int) -> UpdateGoalInput:
        return UpdateGoalInput(goal_id=goal_id, user_id=user_id, **self._common())
