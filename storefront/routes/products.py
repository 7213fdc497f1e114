from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from storefront.database import get_session
from storefront.exceptions import NotFound
from storefront.models.product import Product

router = APIRouter()


@router.get("")
def list_products(session: Session = Depends(get_session)):
    return session.exec(select(Product).order_by(Product.id)).all()


@router.get("/{product_id}")
def get_product(product_id: int, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)
    if not product:
        raise NotFound("Product not found.")
    return product
