import logging

from sqlmodel import Session

from storefront.exceptions import NotFound, ValidationError
from storefront.models.product import Product
from storefront.schemas.product_schemas import ProductWriteRequest
from storefront.utils.numbers import MAX_INTEGER, to_float, to_int

logger = logging.getLogger(__name__)


def validate_product_data(payload: ProductWriteRequest) -> dict:
    """Column values for a product write, or ValidationError."""
    name = (payload.name or "").strip()
    category = (payload.category or "").strip()

    if (
        not name
        or not category
        or payload.price in (None, "")
        or payload.stock_quantity in (None, "")
    ):
        raise ValidationError("Name, price, category, and stock_quantity are required.")

    price = to_float(payload.price)
    stock_quantity = to_int(payload.stock_quantity)
    if price is None or stock_quantity is None:
        raise ValidationError("Price and stock quantity must be numbers.")

    if price < 0 or not 0 <= stock_quantity <= MAX_INTEGER:
        raise ValidationError("Price and stock quantity must not be negative.")

    return {
        "name": name,
        "description": payload.description,
        "price": price,
        "image_url": payload.image_url,
        "category": category,
        "stock_quantity": stock_quantity,
    }


def create_product(session: Session, payload: ProductWriteRequest) -> Product:
    product = Product(**validate_product_data(payload))
    session.add(product)
    session.commit()
    session.refresh(product)

    logger.info(f"Created product {product.id} ({product.name})")
    return product


def update_product(session: Session, product_id: int, payload: ProductWriteRequest) -> Product:
    values = validate_product_data(payload)

    product = session.get(Product, product_id)
    if not product:
        raise NotFound("Product not found.")

    for key, value in values.items():
        setattr(product, key, value)

    session.add(product)
    session.commit()
    session.refresh(product)

    logger.info(f"Updated product {product.id}")
    return product
