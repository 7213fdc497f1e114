from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class PlaceOrderRequest(BaseModel):
    shipping_address: Optional[str] = None
    billing_address: Optional[str] = None
    shipping_method: Optional[str] = None
    # Only read for guests; shape is checked by the cart resolver
    items: Optional[Any] = None


class PlaceOrderResponse(BaseModel):
    message: str
    orderId: int


class StatusUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    tracking_number: Optional[str] = Field(default=None, alias="trackingNumber")
