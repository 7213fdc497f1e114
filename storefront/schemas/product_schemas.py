from pydantic import BaseModel
from typing import Any, Optional


class ProductWriteRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    # numeric strings are accepted; checked by the product service
    price: Optional[Any] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    stock_quantity: Optional[Any] = None
