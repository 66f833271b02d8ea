from pydantic import BaseModel
from decimal import Decimal
from typing import List, Optional

from sanor.schemas.product import ProductOut


class CartItemIn(BaseModel):
    productId: int
    quantity: Optional[int] = None
    size: Optional[str] = None
    color: Optional[str] = None


class CartItemUpdate(BaseModel):
    quantity: int


class CartItemOut(BaseModel):
    id: int
    productId: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    product: Optional[ProductOut] = None


class CartOut(BaseModel):
    items: List[CartItemOut]
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
