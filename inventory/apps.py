from django.apps import AppConfig


class InventoryConfig(AppConfig):
    """
    Configuration for the Inventory application.

    This app manages the product catalog:
    - Physical items with tracked stock (quantity + derived status)
    - Service products (category "Service") created on first sale, never listed as stock
    - Low stock reporting for the notification sender
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'inventory'
    verbose_name = 'Inventory Management'

    def ready(self):
        """
        Import signal handlers when the app is ready.

        Signals handle:
        - Logging product creation/updates
        - Low stock / out of stock warnings
        """
        import inventory.signals  # noqa: F401
