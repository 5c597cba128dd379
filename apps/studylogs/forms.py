from django import forms
from apps.goals.domain.entities import GoalEntity
from .application.use_cases import LogStudyInput


class StudyLogForm(forms.Form):
    hours = forms.DecimalField(
        required=False, max_digits=6, decimal_places=2,
        label="Spent time (hours)",
        widget=forms.NumberInput(attrs={'class': 'form-control', 'min': 0, 'step': 0.25}),
    )
    completed_tasks = forms.TypedMultipleChoiceField(
        required=False, coerce=int,
        label="Completed tasks",
        widget=forms.CheckboxSelectMultiple,
    )
    notes = forms.CharField(
        required=False, strip=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
    )

    def __init__(self, goal: GoalEntity, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.goal = goal
        if goal.is_time_based:
            del self.fields['completed_tasks']
        else:
            del self.fields['hours']
            self.fields['completed_tasks'].choices = [(t.id, t.task_text) for t in goal.tasks]

    def to_input(self, user_id: int) -> LogStudyInput:
        data = self.cleaned_data
        hours = data.get('hours')
        return LogStudyInput(
            goal_id=self.goal.id,
            user_id=user_id,
            hours=float(hours) if hours is not None else None,
            notes=data.get('notes') or "",
            completed_task_ids=list(data.get('completed_tasks') or []),
        )
