from django.apps import AppConfig


class StudysuiteConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "studysuite"
