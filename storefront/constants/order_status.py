from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    RETURNED = "Returned"


# Any status may follow any other; only entering SHIPPED has a side effect.
VALID_STATUSES = [s.value for s in OrderStatus]
