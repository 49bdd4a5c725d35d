from django.apps import AppConfig


class TestsupportConfig(AppConfig):
    name = "apps.testsupport"
    verbose_name = "Test support"
