# -------- ADMIN ORDERS --------
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlmodel import Session

from storefront.config import Settings
from storefront.database import get_session
from storefront.dependencies.admin import require_admin
from storefront.dependencies.services import get_notification_gateway, get_settings
from storefront.exceptions import ValidationError
from storefront.notifications import dispatch_shipped_notification
from storefront.schemas.orders_schemas import StatusUpdateRequest
from storefront.services.order_ledger import get_order, list_orders
from storefront.services.order_status import UNSET, update_status
from storefront.utils.token import AuthenticatedUser

router = APIRouter()


def parse_order_id(order_id: str) -> int:
    if not order_id.isdigit():
        raise ValidationError("Invalid order ID format.")
    return int(order_id)


@router.get("")
def admin_list_orders(
    page: int = 1,
    limit: Optional[int] = None,
    status: Optional[str] = None,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
    _: AuthenticatedUser = Depends(require_admin),
):
    result = list_orders(
        session,
        status=status,
        page=page,
        limit=limit or settings.DEFAULT_PAGE_SIZE,
    )

    return {
        "orders": result.orders,
        "totalPages": result.total_pages,
        "currentPage": result.current_page,
        "totalOrders": result.total_orders,
    }


@router.get("/{order_id}")
def admin_order_details(
    order_id: str,
    session: Session = Depends(get_session),
    _: AuthenticatedUser = Depends(require_admin),
):
    return get_order(session, parse_order_id(order_id))


@router.put("/{order_id}/status")
def update_order_status(
    order_id: str,
    payload: StatusUpdateRequest,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    notifier=Depends(get_notification_gateway),
    _: AuthenticatedUser = Depends(require_admin),
):
    oid = parse_order_id(order_id)

    tracking_number = UNSET
    if "tracking_number" in payload.model_fields_set:
        tracking_number = payload.tracking_number

    change = update_status(session, oid, payload.status, tracking_number)

    # Runs after the response is sent; its outcome never reaches the caller
    if change.entered_shipped:
        background_tasks.add_task(dispatch_shipped_notification, notifier, change)

    return {
        "message": "Order status updated successfully.",
        "orderId": change.order_id,
        "previousStatus": change.previous_status,
        "status": change.status,
        "trackingNumber": change.tracking_number,
    }
