from pydantic import BaseModel
from typing import Optional, List, Dict
from datetime import date
from decimal import Decimal

from .daily_menu import DailyMenuRead
from .kit import KitRead


class MonthlyStats(BaseModel):
    total_cost: Decimal
    average_cost: Decimal
    days_planned: int
    business_days: int


class DailyCost(BaseModel):
    menu_date: date
    cost: Decimal
    description: str


class BreakdownEntry(BaseModel):
    name: str
    value: Decimal
    share: Optional[Decimal] = None  # percent of the period total


class TypeComparison(BaseModel):
    menu_type_id: Optional[str] = None
    name: str
    total_cost: Decimal
    days_planned: int
    average_cost: Decimal


class MonthRow(BaseModel):
    month: int
    name: str
    total_cost: Decimal
    days_planned: int
    average_cost: Decimal
    variation: Optional[Decimal] = None  # percent vs previous month average


class TypeMonthComparison(BaseModel):
    month: int
    name: str
    averages: Dict[str, Decimal]


class MonthlyReport(BaseModel):
    year: int
    month: int
    menu_type_id: Optional[str] = None
    stats: MonthlyStats
    daily: List[DailyCost]
    breakdown: List[BreakdownEntry]
    categories: List[BreakdownEntry]
    comparison: List[TypeComparison]


class AnnualReport(BaseModel):
    year: int
    menu_type_id: Optional[str] = None
    total_cost: Decimal
    days_planned: int
    average_cost: Decimal
    most_expensive: Optional[MonthRow] = None
    cheapest: Optional[MonthRow] = None
    months: List[MonthRow]
    categories: List[BreakdownEntry]
    comparison: List[TypeMonthComparison]


class Dashboard(BaseModel):
    year: int
    month: int
    total_products: int
    days_in_month: int
    days_planned: int
    total_cost: Decimal
    average_cost: Decimal
    recent_menus: List[DailyMenuRead]
    default_kits: List[KitRead]
