from .category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    CategorySummary,
)

from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductRead,
)

from .kit import (
    KitBase,
    KitCreate,
    KitUpdate,
    KitRead,
)

from .menu_type import (
    MenuTypeBase,
    MenuTypeCreate,
    MenuTypeUpdate,
    MenuTypeRead,
    MenuTypeSummary,
)

from .daily_menu import (
    IngredientProduct,
    MenuIngredientCreate,
    MenuIngredientRead,
    KitSummary,
    MenuKitRead,
    DailyMenuBase,
    DailyMenuCreate,
    DailyMenuUpdate,
    DailyMenuRead,
    CalendarDay,
    CalendarMonth,
)

from .duplication import (
    DuplicationStatus,
    DuplicateMenuRequest,
    DuplicateMenuTypeRequest,
    DuplicationOutcome,
    DuplicationReport,
)

from .report import (
    MonthlyStats,
    DailyCost,
    BreakdownEntry,
    TypeComparison,
    MonthRow,
    TypeMonthComparison,
    MonthlyReport,
    AnnualReport,
    Dashboard,
)

from .user import (
    RoleName,
    UserRead,
    SetUserRole,
    CurrentUserRead,
)

__all__ = [
    # Categories
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "CategorySummary",
    # Products
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    # Kits
    "KitBase",
    "KitCreate",
    "KitUpdate",
    "KitRead",
    # Menu Types
    "MenuTypeBase",
    "MenuTypeCreate",
    "MenuTypeUpdate",
    "MenuTypeRead",
    "MenuTypeSummary",
    # Daily Menus
    "IngredientProduct",
    "MenuIngredientCreate",
    "MenuIngredientRead",
    "KitSummary",
    "MenuKitRead",
    "DailyMenuBase",
    "DailyMenuCreate",
    "DailyMenuUpdate",
    "DailyMenuRead",
    "CalendarDay",
    "CalendarMonth",
    # Duplication
    "DuplicationStatus",
    "DuplicateMenuRequest",
    "DuplicateMenuTypeRequest",
    "DuplicationOutcome",
    "DuplicationReport",
    # Reports
    "MonthlyStats",
    "DailyCost",
    "BreakdownEntry",
    "TypeComparison",
    "MonthRow",
    "TypeMonthComparison",
    "MonthlyReport",
    "AnnualReport",
    "Dashboard",
    # Users
    "RoleName",
    "UserRead",
    "SetUserRole",
    "CurrentUserRead",
]
