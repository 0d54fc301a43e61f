from fastapi import APIRouter

from menucost.api.category_routes import router as category_router
from menucost.api.product_routes import router as product_router
from menucost.api.kit_routes import router as kit_router
from menucost.api.menu_type_routes import router as menu_type_router
from menucost.api.daily_menu_routes import router as daily_menu_router
from menucost.api.report_routes import router as report_router
from menucost.api.user_routes import router as user_router

router = APIRouter()

router.include_router(category_router, prefix="/categories", tags=["Categories"])
router.include_router(product_router, prefix="/products", tags=["Products"])
router.include_router(kit_router, prefix="/kits", tags=["Kits"])
router.include_router(menu_type_router, prefix="/menu-types", tags=["Menu Types"])
router.include_router(daily_menu_router, prefix="/menus", tags=["Daily Menus"])
router.include_router(report_router, prefix="/reports", tags=["Reports"])
router.include_router(user_router, tags=["Users"])
