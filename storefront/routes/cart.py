from fastapi import APIRouter, Depends, Response
from sqlmodel import Session, select

from storefront.database import get_session
from storefront.dependencies.auth import get_current_user
from storefront.exceptions import NotFound, ValidationError
from storefront.models.cart import CartItem
from storefront.models.product import Product
from storefront.schemas.cart_schemas import CartAddRequest, CartUpdateRequest
from storefront.services.cart_service import (
    cart_line,
    find_or_create_cart,
    get_cart_lines,
    touch,
)
from storefront.utils.numbers import in_integer_range
from storefront.utils.token import AuthenticatedUser

router = APIRouter()


def _get_line(session: Session, cart_id: int, product_id: int):
    return session.exec(
        select(CartItem).where(
            CartItem.cart_id == cart_id,
            CartItem.product_id == product_id,
        )
    ).first()


# View Cart

@router.get("")
def get_cart(
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    cart = find_or_create_cart(session, current_user.user_id)
    return {"cartId": cart.id, "items": get_cart_lines(session, cart.id)}


# Add to Cart

@router.post("/items", status_code=201)
def add_to_cart(
    data: CartAddRequest,
    response: Response,
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    if not in_integer_range(data.quantity):
        raise ValidationError("Quantity must be a positive integer.")

    product = session.get(Product, data.product_id)
    if not product:
        raise NotFound("Product not found.")

    cart = find_or_create_cart(session, current_user.user_id)

    existing_item = _get_line(session, cart.id, product.id)

    if existing_item:
        if not in_integer_range(existing_item.quantity + data.quantity):
            raise ValidationError("Quantity exceeds the allowed maximum.")

        existing_item.quantity += data.quantity
        touch(existing_item)
        session.add(existing_item)
        session.commit()
        session.refresh(existing_item)
        response.status_code = 200
        return {
            "message": "Item quantity updated in cart.",
            "item": cart_line(existing_item, product),
        }

    new_item = CartItem(cart_id=cart.id, product_id=product.id, quantity=data.quantity)
    session.add(new_item)
    session.commit()
    session.refresh(new_item)

    return {"message": "Item added to cart.", "item": cart_line(new_item, product)}


# Update quantity

@router.put("/items/{product_id}")
def update_cart_item(
    product_id: int,
    data: CartUpdateRequest,
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    if not in_integer_range(data.quantity):
        raise ValidationError("Quantity must be a positive integer.")

    cart = find_or_create_cart(session, current_user.user_id)
    item = _get_line(session, cart.id, product_id)
    if not item:
        raise NotFound("Item not found in cart to update.")

    item.quantity = data.quantity
    touch(item)
    session.add(item)
    session.commit()
    session.refresh(item)

    product = session.get(Product, product_id)
    return {
        "message": "Item quantity updated successfully.",
        "item": cart_line(item, product),
    }


# Remove from Cart

@router.delete("/items/{product_id}")
def remove_from_cart(
    product_id: int,
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    cart = find_or_create_cart(session, current_user.user_id)
    item = _get_line(session, cart.id, product_id)
    if not item:
        raise NotFound("Item not found in cart.")

    session.delete(item)
    session.commit()

    return {"message": "Item removed from cart."}
