from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from electgo.exceptions import ElectgoError
from inventory.services import low_stock_alerts, low_stock_threshold
from notifications.services import is_valid_email, send_inventory_alert


class Command(BaseCommand):
    help = 'Emails the current low stock items to the configured recipients.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            action='append',
            dest='emails',
            help='Recipient address (repeatable). Defaults to LOW_STOCK_ALERT_EMAILS.',
        )
        parser.add_argument(
            '--threshold',
            type=int,
            help='Quantity at or below which an item is reported.',
        )

    def handle(self, *args, **options):
        recipients = options['emails'] or settings.INVENTORY_CONFIG['LOW_STOCK_ALERT_EMAILS']
        if not recipients:
            raise CommandError('No recipients: pass --email or set LOW_STOCK_ALERT_EMAILS')

        invalid = [email for email in recipients if not is_valid_email(email)]
        if invalid:
            raise CommandError(f"Invalid email format: {', '.join(invalid)}")

        threshold = low_stock_threshold(options['threshold'])
        alerts = low_stock_alerts(threshold)
        if not alerts:
            self.stdout.write(self.style.SUCCESS(f'No items at or below {threshold} units. Nothing to send.'))
            return

        self.stdout.write(self.style.WARNING(f'{len(alerts)} item(s) at or below {threshold} units'))

        for email in recipients:
            try:
                send_inventory_alert(email, alerts)
            except ElectgoError as e:
                raise CommandError(f'Failed to alert {email}: {e.message}') from e
            self.stdout.write(self.style.SUCCESS(f'Alert sent to {email}'))
