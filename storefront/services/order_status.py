import logging
from dataclasses import dataclass
from typing import Optional

from sqlmodel import Session, select

from storefront.constants.order_status import OrderStatus, VALID_STATUSES
from storefront.exceptions import NotFound, ValidationError
from storefront.models.order import Order
from storefront.models.user import User

logger = logging.getLogger(__name__)

# Marks "tracking number not sent" as opposed to an explicit None
UNSET = object()


@dataclass
class StatusChange:
    order_id: int
    previous_status: str
    status: str
    tracking_number: Optional[str]
    owner_email: Optional[str] = None
    owner_name: Optional[str] = None

    @property
    def entered_shipped(self) -> bool:
        return (
            self.previous_status != OrderStatus.SHIPPED.value
            and self.status == OrderStatus.SHIPPED.value
        )

    @property
    def should_notify(self) -> bool:
        return self.entered_shipped and bool(self.owner_email)


def validate_status(status: Optional[str]) -> str:
    if not status or status not in VALID_STATUSES:
        raise ValidationError(
            "Invalid or missing status value. Must be one of: "
            + ", ".join(VALID_STATUSES)
        )
    return status


def update_status(
    session: Session,
    order_id: int,
    new_status: Optional[str],
    tracking_number=UNSET,
) -> StatusChange:
    """Set an order's status and tracking number.

    Every status is reachable from every other one. An omitted
    ``tracking_number`` keeps the stored value; anything passed replaces it.
    """
    new_status = validate_status(new_status)

    result = session.exec(
        select(Order, User)
        .join(User, User.id == Order.user_id, isouter=True)
        .where(Order.id == order_id)
    ).first()

    if not result:
        raise NotFound("Order not found.")

    order, owner = result
    previous_status = order.status

    if tracking_number is UNSET:
        tracking_number = order.tracking_number

    if new_status == OrderStatus.SHIPPED.value and not tracking_number:
        logger.warning(f"Order {order_id} marked Shipped without a tracking number")

    order.status = new_status
    order.tracking_number = tracking_number
    session.add(order)
    session.commit()

    logger.info(
        f"Order {order_id} status {previous_status} -> {new_status}, "
        f"tracking {tracking_number or 'N/A'}"
    )

    return StatusChange(
        order_id=order_id,
        previous_status=previous_status,
        status=new_status,
        tracking_number=tracking_number,
        owner_email=owner.email if owner else None,
        owner_name=owner.name if owner else None,
    )
