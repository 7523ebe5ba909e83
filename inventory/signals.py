from django.conf import settings
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from .models import Product
import logging

logger = logging.getLogger(__name__)


# ============================================
# PRODUCT SIGNALS
# ============================================

@receiver(post_save, sender=Product)
def product_post_save(sender, instance, created, **kwargs):
    """
    Log product creation/updates.

    Stock deductions from sales go through QuerySet.update() and are logged
    by inventory.services.deduct_stock instead.
    """
    if created:
        logger.info(
            f"Product created: #{instance.pk} - {instance.name} "
            f"(Category: {instance.category}, Quantity: {instance.quantity})"
        )
    else:
        logger.debug(
            f"Product updated: #{instance.pk} - {instance.name} "
            f"(Status: {instance.status}, Quantity: {instance.quantity})"
        )


# ============================================
# LOW STOCK ALERTS
# ============================================

@receiver(post_save, sender=Product)
def check_low_stock_alert(sender, instance, **kwargs):
    """
    Warn when a physical item reaches low stock levels.

    Emails go out through the send_low_stock_alert management command.
    """
    if instance.is_service:
        return

    threshold = settings.INVENTORY_CONFIG['LOW_STOCK_THRESHOLD']

    if instance.status == Product.STATUS_OUT_OF_STOCK:
        logger.error(f"OUT OF STOCK: {instance.name} (#{instance.pk}) is out of stock")
    elif instance.quantity <= threshold:
        logger.warning(
            f"LOW STOCK ALERT: {instance.name} (#{instance.pk}) "
            f"has only {instance.quantity} units remaining"
        )


# ============================================
# AUDIT TRAIL
# ============================================

@receiver(post_delete, sender=Product)
def log_product_deletion(sender, instance, **kwargs):
    logger.warning(
        f"[AUDIT] Product DELETED: "
        f"ID: {instance.pk} | "
        f"Name: {instance.name!r} | "
        f"Category: {instance.category} | "
        f"Quantity: {instance.quantity}"
    )
