from django.apps import AppConfig


class RevenueConfig(AppConfig):
    """Derived revenue figures (no tables of its own)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'revenue'
    verbose_name = 'Revenue'
