# apps/studylogs/models.py
from django.db import models
from django.conf import settings
from django.utils import timezone


class StudyLog(models.Model):
    """Wpis w dzienniku nauki. Tylko dopisujemy, nigdy nie edytujemy."""
    goal = models.ForeignKey('goals.Goal', on_delete=models.CASCADE, related_name='study_logs')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='study_logs')

    # Kopia goal_type z chwili zapisu
    log_type = models.CharField(max_length=10)

    logged_time = models.PositiveIntegerField(null=True, blank=True, help_text="Minutes (time-based goals)")
    completed_task_ids = models.JSONField(default=list, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.goal} @ {self.created_at:%Y-%m-%d %H:%M}"
