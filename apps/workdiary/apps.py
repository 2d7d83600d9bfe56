from django.apps import AppConfig


class WorkdiaryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.workdiary"
    verbose_name = "Work Diary"
