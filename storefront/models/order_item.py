from sqlmodel import SQLModel, Field , Relationship
from typing import Optional , TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.models.order import Order


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True, ondelete="CASCADE")
    # Kept when the product is deleted so the order history survives
    product_id: Optional[int] = Field(
        default=None, foreign_key="product.id", ondelete="SET NULL"
    )

    quantity: int
    price_at_purchase: float

    order: Optional["Order"] = Relationship(back_populates="items")
