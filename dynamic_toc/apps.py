from django.apps import AppConfig


class DynamicTocConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dynamic_toc'
    verbose_name = 'Dynamic table of contents'

    def ready(self):
        """Import signal handlers when app is ready."""
        import dynamic_toc.signals  # noqa: F401 - Register page cache signal handlers
