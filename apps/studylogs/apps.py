from django.apps import AppConfig

class StudyLogsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.studylogs'
    label = 'studylogs'
    verbose_name = 'Study logs'
