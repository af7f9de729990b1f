from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.catalog_schemas import ProductSchema


class CartItemSchema(BaseModel):
    """
    One cart entry as the client holds it: {"productId": ..., "quantity": ...}
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    quantity: int


class CartLineSchema(BaseModel):
    product: ProductSchema
    quantity: int
    line_total: Decimal


class PricedCartSchema(BaseModel):
    lines: List[CartLineSchema] = []
    total: Decimal = Decimal("0")
    item_count: int = 0
    currency: Optional[str] = None


class CartAddRequestSchema(BaseModel):
    product_id: str
    # Raw on purpose: anything that is not a positive integer becomes 1.
    quantity: Optional[int | float | str] = 1


class CartUpdateRequestSchema(BaseModel):
    quantity: int
