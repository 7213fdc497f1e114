import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from storefront.exceptions import InternalError
from storefront.models.cart import Cart, CartItem
from storefront.models.product import Product
from storefront.utils.timestamps import utc_now

logger = logging.getLogger(__name__)


def find_or_create_cart(session: Session, user_id: int) -> Cart:
    cart = session.exec(select(Cart).where(Cart.user_id == user_id)).first()
    if cart:
        return cart

    cart = Cart(user_id=user_id)
    session.add(cart)
    try:
        session.commit()
    except IntegrityError:
        # Another request created it first
        session.rollback()
        cart = session.exec(select(Cart).where(Cart.user_id == user_id)).first()
        if not cart:
            raise InternalError("Failed to find or create cart after conflict.")
        return cart

    session.refresh(cart)
    logger.info(f"Created new cart with ID {cart.id} for user {user_id}")
    return cart


def cart_line(item: CartItem, product: Product) -> dict:
    return {
        "cartItemId": item.id,
        "productId": product.id,
        "name": product.name,
        "price": product.price,
        "image": product.image_url,
        "quantity": item.quantity,
    }


def get_cart_lines(session: Session, cart_id: int) -> list:
    rows = session.exec(
        select(CartItem, Product)
        .join(Product, CartItem.product_id == Product.id)
        .where(CartItem.cart_id == cart_id)
        .order_by(CartItem.id)
    ).all()

    return [cart_line(item, product) for item, product in rows]


def touch(item: CartItem):
    item.updated_at = utc_now()
