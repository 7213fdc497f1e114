import logging

from storefront.notifications.gateway import ShippedOrderDetails
from storefront.services.order_status import StatusChange

logger = logging.getLogger(__name__)


def dispatch_shipped_notification(gateway, change: StatusChange) -> None:
    """Background task run after a status update commits.

    Sends at most once and never raises; the outcome is only logged.
    """
    if not change.should_notify:
        logger.debug(f"No shipped notification needed for order {change.order_id}")
        return

    try:
        sent = gateway.send_shipped_notification(
            change.owner_email,
            ShippedOrderDetails(
                order_id=change.order_id,
                recipient_name=change.owner_name,
            ),
            change.tracking_number,
        )
    except Exception:
        logger.exception(f"Shipped notification failed for order {change.order_id}")
        return

    if sent:
        logger.info(f"Shipped notification sent for order {change.order_id}")
    else:
        logger.warning(f"Shipped notification not delivered for order {change.order_id}")
