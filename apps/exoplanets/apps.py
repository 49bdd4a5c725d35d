from django.apps import AppConfig


class ExoplanetsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.exoplanets"
