# -------- ADMIN PRODUCTS --------
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.dependencies.admin import require_admin
from storefront.exceptions import ValidationError
from storefront.schemas.product_schemas import ProductWriteRequest
from storefront.services.product_service import create_product, update_product
from storefront.utils.numbers import in_integer_range, to_int
from storefront.utils.token import AuthenticatedUser

router = APIRouter()


def parse_product_id(product_id: str) -> int:
    value = to_int(product_id)
    if not in_integer_range(value):
        raise ValidationError("Invalid Product ID provided.")
    return value


@router.post("", status_code=201)
def admin_create_product(
    payload: ProductWriteRequest,
    session: Session = Depends(get_session),
    admin: AuthenticatedUser = Depends(require_admin),
):
    product = create_product(session, payload)

    return {
        "message": "New product created successfully!",
        "productId": product.id,
    }


@router.put("/{product_id}")
def admin_update_product(
    product_id: str,
    payload: ProductWriteRequest,
    session: Session = Depends(get_session),
    admin: AuthenticatedUser = Depends(require_admin),
):
    product = update_product(session, parse_product_id(product_id), payload)

    return {
        "message": f"Product ID {product.id} updated successfully.",
        "product": product,
    }
