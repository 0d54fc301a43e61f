from . import category
from . import product
from . import kit
from . import menu_type
from . import daily_menu
from . import menu_line
from . import user

__all__ = [
    "category",
    "product",
    "kit",
    "menu_type",
    "daily_menu",
    "menu_line",
    "user",
]
