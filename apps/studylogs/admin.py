from django.contrib import admin
from .models import StudyLog


@admin.register(StudyLog)
class StudyLogAdmin(admin.ModelAdmin):
    list_display = ('goal', 'user', 'log_type', 'logged_time', 'created_at')
    list_filter = ('log_type', 'created_at')
    search_fields = ('goal__title', 'notes')

    # Wpisów się nie edytuje (usuwane tylko kaskadowo z celem)
    def has_change_permission(self, request, obj=None):
        return False
