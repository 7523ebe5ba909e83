from django.apps import AppConfig


class SalesConfig(AppConfig):
    """
    Configuration for the Sales application.

    Sales of catalog items deduct stock; sales of configured service items
    create or reuse a "Service" product and never touch stock.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sales'
    verbose_name = 'Sales'

    def ready(self):
        import sales.signals  # noqa: F401
