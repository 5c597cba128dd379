# apps/goals/models.py
from django.db import models
from django.conf import settings


class Goal(models.Model):
    class GoalTypeChoices(models.TextChoices):
        TIME = 'time', 'Time-based'
        TASK = 'task', 'Task-based'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goals')
    title = models.CharField(max_length=200)
    subject = models.CharField(max_length=200)

    # Po utworzeniu nie zmieniamy typu (pilnuje formularz i UpdateGoalUseCase)
    goal_type = models.CharField(
        max_length=10,
        choices=GoalTypeChoices.choices,
        default=GoalTypeChoices.TIME
    )

    deadline = models.DateField(null=True, blank=True)
    target_time = models.DecimalField(
        max_digits=6, decimal_places=2,
        null=True, blank=True,
        help_text="Target in hours (time-based goals only)"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title
