from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('task_text', 'goal', 'is_completed', 'updated_at')
    list_filter = ('is_completed',)
    search_fields = ('task_text', 'goal__title')
    # is_completed zmienia tylko dziennik nauki
    readonly_fields = ('is_completed',)
