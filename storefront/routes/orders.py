import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.config import Settings
from storefront.database import get_session
from storefront.dependencies.auth import get_current_user, get_optional_user
from storefront.dependencies.services import get_settings
from storefront.exceptions import ValidationError
from storefront.schemas.orders_schemas import PlaceOrderRequest, PlaceOrderResponse
from storefront.services.cart_resolver import resolve_checkout_items
from storefront.services.order_ledger import create_order, get_order_history
from storefront.utils.token import AuthenticatedUser

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=201, response_model=PlaceOrderResponse)
def place_order(
    payload: PlaceOrderRequest,
    session: Session = Depends(get_session),
    current_user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    settings: Settings = Depends(get_settings),
):
    if current_user:
        logger.info(f"Order placement attempt by user {current_user.user_id}")
    else:
        logger.info("Order placement attempt by guest")

    if not payload.shipping_address or not payload.shipping_address.strip():
        raise ValidationError("Shipping address is required.")

    cart = resolve_checkout_items(
        session,
        current_user,
        payload.items,
        reprice_guest_items=settings.REPRICE_GUEST_ITEMS,
    )

    order_id = create_order(
        session,
        user_id=current_user.user_id if current_user else None,
        shipping_address=payload.shipping_address,
        billing_address=payload.billing_address,
        shipping_method=payload.shipping_method,
        items=cart.items,
        cart_id=cart.cart_id,
    )

    return {"message": "Order placed successfully!", "orderId": order_id}


@router.get("/my-orders")
def my_orders(
    session: Session = Depends(get_session),
    current_user: AuthenticatedUser = Depends(get_current_user),
):
    return get_order_history(session, current_user.user_id)
