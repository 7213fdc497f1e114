from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime

from storefront.constants.order_status import OrderStatus
from storefront.utils.timestamps import utc_now
from storefront.models.order_item import OrderItem


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    # NULL marks a guest order
    user_id: Optional[int] = Field(
        default=None, foreign_key="user.id", index=True, ondelete="SET NULL"
    )
    order_date: datetime = Field(
        default_factory=utc_now, index=True, sa_type=DateTime(timezone=True)
    )

    total_amount: float
    status: str = Field(default=OrderStatus.PENDING.value, index=True)

    shipping_address: str
    billing_address: Optional[str] = None
    shipping_method: Optional[str] = None
    tracking_number: Optional[str] = None

    items: List["OrderItem"] = Relationship(back_populates="order")
