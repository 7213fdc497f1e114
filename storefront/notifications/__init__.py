from .gateway import EmailNotificationGateway, ShippedOrderDetails
from .dispatcher import dispatch_shipped_notification

__all__ = [
    "EmailNotificationGateway",
    "ShippedOrderDetails",
    "dispatch_shipped_notification",
]
