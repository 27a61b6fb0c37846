from django.apps import AppConfig


class ConstructionConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'construction'
    verbose_name = 'Construction projects'

    integration = None

    def ready(self):
        from .config import load_integration_config

        self.integration = load_integration_config()


def get_integration_config():
    from django.apps import apps

    return apps.get_app_config('construction').integration
