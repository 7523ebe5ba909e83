# sales/signals.py - sale audit trail

from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
import logging

from sales.models import Transaction

logger = logging.getLogger(__name__)


# ============================================
# SALE CREATION SIGNAL
# ============================================

@receiver(post_save, sender=Transaction)
def log_sale(sender, instance, created, **kwargs):
    """
    Monitor sales - stock updates are handled by the sale workflow.
    """
    if not created or instance.type != Transaction.TYPE_SALE:
        return

    logger.info(
        f"[SALE MONITOR] Sale #{instance.pk} | "
        f"Item: {instance.item_name} | "
        f"Quantity Sold: {instance.quantity} | "
        f"Price: {instance.price} | "
        f"Date: {instance.timestamp}"
    )


# ============================================
# AUDIT TRAIL
# ============================================

@receiver(post_delete, sender=Transaction)
def log_sale_deletion(sender, instance, **kwargs):
    logger.warning(
        f"[AUDIT] Transaction DELETED: "
        f"ID: {instance.pk} | "
        f"Type: {instance.type} | "
        f"Product ID: {instance.product_id} | "
        f"Quantity: {instance.quantity} | "
        f"Charged: {instance.charged_price}"
    )
