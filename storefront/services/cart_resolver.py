import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

from sqlmodel import Session, select

from storefront.exceptions import NotFound, ValidationError
from storefront.models.cart import Cart, CartItem
from storefront.models.product import Product
from storefront.schemas.cart_schemas import CartLineItem
from storefront.utils.numbers import in_integer_range, to_float, to_int
from storefront.utils.token import AuthenticatedUser

logger = logging.getLogger(__name__)

INVALID_GUEST_ITEMS = "Invalid cart item data provided for guest checkout."


@dataclass
class ResolvedCart:
    items: List[CartLineItem] = field(default_factory=list)
    # Only set for authenticated checkouts; used to clear the cart afterwards
    cart_id: Optional[int] = None


def resolve_checkout_items(
    session: Session,
    actor: Optional[AuthenticatedUser],
    guest_items: Any = None,
    reprice_guest_items: bool = False,
) -> ResolvedCart:
    if actor is not None:
        return _resolve_user_cart(session, actor)

    items = parse_guest_items(guest_items)

    if reprice_guest_items:
        items = _reprice(session, items)

    logger.info(f"Resolved {len(items)} guest cart items")
    return ResolvedCart(items=items)


def _resolve_user_cart(session: Session, actor: AuthenticatedUser) -> ResolvedCart:
    cart = session.exec(
        select(Cart).where(Cart.user_id == actor.user_id)
    ).first()

    if not cart:
        raise NotFound("User cart not found.")

    rows = session.exec(
        select(CartItem, Product)
        .join(Product, CartItem.product_id == Product.id)
        .where(CartItem.cart_id == cart.id)
        .order_by(CartItem.id)
    ).all()

    items = [
        CartLineItem(
            product_id=product.id,
            quantity=cart_item.quantity,
            unit_price=product.price,
        )
        for cart_item, product in rows
    ]

    return ResolvedCart(items=items, cart_id=cart.id)


def parse_guest_items(guest_items: Any) -> List[CartLineItem]:
    """Validate a client-supplied cart.

    Prices are taken as sent, but must be non-negative and keep the line total finite.
    """
    if not isinstance(guest_items, list) or not guest_items:
        raise ValidationError("Cart items are required for guest checkout.")

    items = []
    for entry in guest_items:
        if not isinstance(entry, dict):
            raise ValidationError(INVALID_GUEST_ITEMS)

        product_id = to_int(entry.get("productId") or entry.get("id"))
        quantity = to_int(entry.get("quantity"))
        price = to_float(entry.get("price"))

        if not in_integer_range(product_id) or not in_integer_range(quantity):
            raise ValidationError(INVALID_GUEST_ITEMS)

        if price is None or price < 0 or not math.isfinite(price * quantity):
            raise ValidationError(INVALID_GUEST_ITEMS)

        items.append(
            CartLineItem(product_id=product_id, quantity=quantity, unit_price=price)
        )

    return items


def _reprice(session: Session, items: List[CartLineItem]) -> List[CartLineItem]:
    repriced = []
    for item in items:
        product = session.get(Product, item.product_id)
        if not product:
            raise NotFound(f"Product {item.product_id} not found.")

        repriced.append(item.model_copy(update={"unit_price": product.price}))

    return repriced

