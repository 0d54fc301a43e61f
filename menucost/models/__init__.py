from .base import Base
from .category import Category
from .product import Product
from .kit import Kit
from .menu_type import MenuType
from .daily_menu import DailyMenu, MenuIngredient, MenuKit
from .user import Profile, UserRole

__all__ = [
    "Base",
    "Category",
    "Product",
    "Kit",
    "MenuType",
    "DailyMenu",
    "MenuIngredient",
    "MenuKit",
    "Profile",
    "UserRole",
]
