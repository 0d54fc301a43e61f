from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class KitBase(BaseModel):
    name: str
    price: Decimal = Field(ge=0)
    is_default: bool = False


class KitCreate(KitBase):
    pass


class KitUpdate(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    is_default: Optional[bool] = None


class KitRead(KitBase):
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
