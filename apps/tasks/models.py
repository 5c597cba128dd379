# apps/tasks/models.py
from django.db import models


class Task(models.Model):
    goal = models.ForeignKey('goals.Goal', on_delete=models.CASCADE, related_name='tasks')
    task_text = models.CharField(max_length=255)

    # Projekcja ostatniego StudyLog (completed_task_ids), nie osobne źródło prawdy.
    # Zapisywane tylko razem z nowym wpisem w dzienniku.
    is_completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.task_text
