from pydantic import BaseModel, ConfigDict, Field


class CartAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    quantity: int = 1


class CartUpdateRequest(BaseModel):
    quantity: int


class CartLineItem(BaseModel):
    """A purchasable line resolved at checkout."""

    product_id: int
    quantity: int
    unit_price: float
