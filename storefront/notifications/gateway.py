import logging
from dataclasses import dataclass
from typing import Optional

from storefront.config import Settings, settings as default_settings
from storefront.services.email_service import send_email
from storefront.utils.template import render_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShippedOrderDetails:
    order_id: int
    recipient_name: Optional[str] = None


class EmailNotificationGateway:
    """Customer notifications delivered as transactional email."""

    def __init__(self, settings: Settings = default_settings):
        self.settings = settings

    def send_shipped_notification(
        self,
        email: str,
        details: ShippedOrderDetails,
        tracking_number: Optional[str] = None,
    ) -> bool:
        try:
            html = render_template(
                "user_emails/order_shipped.html",
                order_id=details.order_id,
                recipient_name=details.recipient_name,
                tracking_number=tracking_number,
                store_name=self.settings.STORE_NAME,
            )
            return send_email(
                to=email,
                subject=f"Your Order #{details.order_id} Has Shipped!",
                html=html,
                settings=self.settings,
            )
        except Exception:
            logger.exception(f"Error sending shipped email for order {details.order_id}")
            return False
