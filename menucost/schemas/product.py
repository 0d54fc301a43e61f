from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from .category import CategorySummary


class ProductBase(BaseModel):
    name: str
    category_id: Optional[str] = None
    unit: str  # kg, l, un, ...
    price: Decimal = Field(ge=0)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    category_id: Optional[str] = None
    unit: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)


class ProductRead(ProductBase):
    id: str
    price_updated_at: datetime
    created_at: datetime
    updated_at: datetime
    category: Optional[CategorySummary] = None

    class Config:
        from_attributes = True
