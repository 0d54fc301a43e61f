from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal

from .category import CategorySummary
from .menu_type import MenuTypeSummary


# ---------- Line items ----------
class IngredientProduct(BaseModel):
    id: str
    name: str
    unit: str
    price: Decimal
    category: Optional[CategorySummary] = None

    class Config:
        from_attributes = True


class MenuIngredientCreate(BaseModel):
    product_id: str
    per_capita: Decimal = Field(gt=0)


class MenuIngredientRead(BaseModel):
    id: str
    menu_id: str
    product_id: str
    per_capita: Decimal
    cost: Decimal
    product: Optional[IngredientProduct] = None

    class Config:
        from_attributes = True


class KitSummary(BaseModel):
    id: str
    name: str
    price: Decimal

    class Config:
        from_attributes = True


class MenuKitRead(BaseModel):
    id: str
    menu_id: str
    kit_id: str
    cost: Decimal
    kit: Optional[KitSummary] = None

    class Config:
        from_attributes = True


# ---------- Daily Menu ----------
class DailyMenuBase(BaseModel):
    menu_date: date
    description: Optional[str] = None


class DailyMenuCreate(DailyMenuBase):
    menu_type_id: Optional[str] = None  # falls back to the default menu type
    apply_default_kits: bool = True


class DailyMenuUpdate(BaseModel):
    description: Optional[str] = None


class DailyMenuRead(DailyMenuBase):
    id: str
    menu_type_id: Optional[str] = None
    total_cost: Decimal
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    ingredients: List[MenuIngredientRead] = []
    kits: List[MenuKitRead] = []
    menu_type: Optional[MenuTypeSummary] = None

    class Config:
        from_attributes = True


# ---------- Calendar ----------
class CalendarDay(BaseModel):
    day: date
    weekday: int  # Monday == 0
    menu: Optional[DailyMenuRead] = None


class CalendarMonth(BaseModel):
    year: int
    month: int
    menu_type_id: Optional[str] = None
    weekdays_only: bool
    days: List[CalendarDay]
