from django.contrib import admin
from .models import Goal
from apps.tasks.models import Task


class TaskInline(admin.TabularInline):
    model = Task
    extra = 1
    fields = ('task_text', 'is_completed')
    readonly_fields = ('is_completed',)  # zmienia tylko dziennik nauki


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'subject', 'goal_type', 'deadline', 'target_time', 'user')
    list_filter = ('goal_type', 'deadline')
    search_fields = ('title', 'subject')
    inlines = [TaskInline]
