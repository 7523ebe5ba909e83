from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    """Email notifications: low stock alerts and sales reports."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'notifications'
    verbose_name = 'Notifications'
