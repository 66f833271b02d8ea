from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from typing import List, Optional


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    imageUrl: Optional[str] = None


class CategoryOut(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    createdAt: str


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(max_digits=10, decimal_places=2)
    originalPrice: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    categoryId: Optional[int] = None
    imageUrl: Optional[str] = None
    images: Optional[List[str]] = None
    sizes: Optional[str] = None
    colors: Optional[str] = None
    stock: Optional[int] = None
    featured: bool = False
    newArrival: bool = False


class ProductUpdate(BaseModel):
    # Only fields present in the request body are applied; slug is not editable
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    originalPrice: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    categoryId: Optional[int] = None
    imageUrl: Optional[str] = None
    images: Optional[List[str]] = None
    sizes: Optional[str] = None
    colors: Optional[str] = None
    stock: Optional[int] = None
    inStock: Optional[bool] = None
    featured: Optional[bool] = None
    newArrival: Optional[bool] = None

    @field_validator("name", "price")
    @classmethod
    def not_null(cls, value):
        # Omitted means unchanged; an explicit null would clear a required column
        if value is None:
            raise ValueError("must not be null")
        return value


class ProductOut(BaseModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    price: Decimal
    originalPrice: Optional[Decimal] = None
    categoryId: Optional[int] = None
    imageUrl: Optional[str] = None
    images: List[str] = []
    sizes: Optional[str] = None
    colors: Optional[str] = None
    sizeList: List[str] = []
    colorList: List[str] = []
    stock: Optional[int] = None
    inStock: bool = True
    featured: bool = False
    newArrival: bool = False
    createdAt: str
    updatedAt: str
