import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from storefront.constants.order_status import OrderStatus
from storefront.exceptions import InternalError, NotFound, ValidationError
from storefront.models.cart import CartItem
from storefront.models.order import Order
from storefront.models.order_item import OrderItem
from storefront.models.product import Product
from storefront.models.user import User
from storefront.schemas.cart_schemas import CartLineItem
from storefront.utils.pagination import paginate

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_METHOD = "standard"
UNAVAILABLE_PRODUCT_NAME = "Product Unavailable"
PLACEHOLDER_IMAGE = "images/placeholder.png"


@dataclass
class OrderPage:
    orders: List[dict]
    total_pages: int
    current_page: int
    total_orders: int


def _to_number(value) -> float:
    """Numeric value of ``value``; anything missing or non-numeric counts as 0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def calculate_total(items: Iterable[CartLineItem]) -> float:
    return sum(
        _to_number(item.unit_price) * _to_number(item.quantity) for item in items
    )


def create_order(
    session: Session,
    *,
    user_id: Optional[int],
    shipping_address: Optional[str],
    items: List[CartLineItem],
    billing_address: Optional[str] = None,
    shipping_method: Optional[str] = None,
    cart_id: Optional[int] = None,
) -> int:
    """Write an order, its items and (for users) the cart clear in one transaction.

    Returns the new order id. Nothing is left behind when any step fails.
    """
    if not shipping_address or not shipping_address.strip():
        raise ValidationError("Shipping address is required.")

    if not items:
        raise ValidationError("Cannot place order with an empty cart.")

    total_amount = calculate_total(items)
    if total_amount < 0 or not math.isfinite(total_amount):
        raise ValidationError("Order total is out of range.")

    try:
        order = Order(
            user_id=user_id,
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            shipping_address=shipping_address,
            billing_address=billing_address or shipping_address,
            shipping_method=shipping_method or DEFAULT_SHIPPING_METHOD,
        )
        session.add(order)
        session.flush()

        for item in items:
            session.add(OrderItem(
                order_id=order.id,
                product_id=item.product_id,
                quantity=item.quantity,
                price_at_purchase=_to_number(item.unit_price),
            ))

        if user_id is not None and cart_id is not None:
            result = session.exec(
                delete(CartItem).where(CartItem.cart_id == cart_id)
            )
            logger.info(
                f"Cleared {result.rowcount} items from cart {cart_id} for user {user_id}"
            )

        session.commit()

    except (SQLAlchemyError, OverflowError):
        session.rollback()
        logger.exception("Error placing order, transaction rolled back")
        raise InternalError("Failed to place order due to a server error.")

    logger.info(
        f"Order {order.id} placed by {user_id or 'guest'} "
        f"with {len(items)} items, total {total_amount:.2f}"
    )
    return order.id


def _order_row(order: Order, user: Optional[User]) -> dict:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "order_date": order.order_date,
        "total_amount": order.total_amount,
        "status": order.status,
        "shipping_address": order.shipping_address,
        "billing_address": order.billing_address,
        "shipping_method": order.shipping_method,
        "tracking_number": order.tracking_number,
        "userEmail": user.email if user else None,
    }


def list_orders(
    session: Session,
    *,
    status: Optional[str] = None,
    page: int = 1,
    limit: int = 15,
) -> OrderPage:
    query = (
        select(Order, User)
        .join(User, User.id == Order.user_id, isouter=True)
    )

    if status:
        query = query.where(Order.status == status)

    query = query.order_by(Order.order_date.desc(), Order.id.desc())

    data = paginate(session=session, query=query, page=page, limit=limit)

    return OrderPage(
        orders=[_order_row(o, u) for o, u in data["results"]],
        total_pages=data["total_pages"],
        current_page=data["current_page"],
        total_orders=data["total_items"],
    )


def get_order(session: Session, order_id: int) -> dict:
    result = session.exec(
        select(Order, User)
        .join(User, User.id == Order.user_id, isouter=True)
        .where(Order.id == order_id)
    ).first()

    if not result:
        raise NotFound("Order not found.")

    order, user = result

    items = session.exec(
        select(OrderItem).where(OrderItem.order_id == order.id).order_by(OrderItem.id)
    ).all()

    return {
        **_order_row(order, user),
        "userName": user.name if user else None,
        "items": [
            {
                "orderItemId": i.id,
                "productId": i.product_id,
                "quantity": i.quantity,
                "price_at_purchase": i.price_at_purchase,
                "total": i.price_at_purchase * i.quantity,
            }
            for i in items
        ],
    }


def get_order_history(session: Session, user_id: int) -> List[dict]:
    rows = session.exec(
        select(Order, OrderItem, Product)
        .join(OrderItem, OrderItem.order_id == Order.id, isouter=True)
        .join(Product, Product.id == OrderItem.product_id, isouter=True)
        .where(Order.user_id == user_id)
        .order_by(Order.order_date.desc(), Order.id.desc(), OrderItem.id.asc())
    ).all()

    # dicts keep insertion order, so order recency survives the regrouping
    orders = {}
    for order, item, product in rows:
        if order.id not in orders:
            orders[order.id] = {
                "id": order.id,
                "order_date": order.order_date,
                "total_amount": order.total_amount,
                "status": order.status,
                "shipping_address": order.shipping_address,
                "tracking_number": order.tracking_number,
                "items": [],
            }

        if item is not None:
            orders[order.id]["items"].append({
                "orderItemId": item.id,
                "productId": item.product_id,
                "productName": product.name if product else UNAVAILABLE_PRODUCT_NAME,
                "productImage": (product.image_url if product else None) or PLACEHOLDER_IMAGE,
                "quantity": item.quantity,
                "price_at_purchase": item.price_at_purchase,
            })

    return list(orders.values())

