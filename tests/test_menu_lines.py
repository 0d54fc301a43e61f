"""Line-item writes keep DailyMenu.total_cost equal to the sum of its items."""
import uuid
from datetime import date
from decimal import Decimal

import pytest

from menucost.core.errors import NotFoundError
from menucost.crud import menu_line, product as product_crud
from menucost.models import MenuIngredient
from menucost.schemas import MenuIngredientCreate, ProductUpdate
from menucost.services.costing import menu_total


def _assert_consistent(menu):
    assert menu.total_cost == menu_total(menu)


class TestIngredients:
    async def test_add_ingredient_freezes_cost_and_updates_total(self, db, make_menu, make_product):
        menu = await make_menu()
        rice = await make_product("Rice", "5.00")

        menu = await menu_line.add_ingredient(
            db, menu.id, MenuIngredientCreate(product_id=rice.id, per_capita=Decimal("0.2"))
        )

        assert len(menu.ingredients) == 1
        assert menu.ingredients[0].cost == Decimal("1.0")
        assert menu.total_cost == Decimal("1.0")
        _assert_consistent(menu)

    async def test_total_follows_every_add_and_remove(self, db, make_menu, make_product, make_kit):
        menu = await make_menu()
        rice = await make_product("Rice", "5.00")
        beans = await make_product("Beans", "8.00")
        bread = await make_kit("Bread", "0.50")

        menu = await menu_line.add_ingredient(db, menu.id, MenuIngredientCreate(product_id=rice.id, per_capita="0.1"))
        _assert_consistent(menu)
        menu = await menu_line.add_ingredient(db, menu.id, MenuIngredientCreate(product_id=beans.id, per_capita="0.05"))
        _assert_consistent(menu)
        menu, linked = await menu_line.toggle_kit(db, menu.id, bread.id)
        assert linked is True
        _assert_consistent(menu)
        assert menu.total_cost == Decimal("1.4")

        rice_line = next(i for i in menu.ingredients if i.product_id == rice.id)
        menu = await menu_line.remove_ingredient(db, menu.id, rice_line.id)
        _assert_consistent(menu)
        assert menu.total_cost == Decimal("0.9")

        menu, linked = await menu_line.toggle_kit(db, menu.id, bread.id)
        assert linked is False
        _assert_consistent(menu)
        assert menu.total_cost == Decimal("0.4")

    async def test_price_change_does_not_touch_existing_lines(self, db, make_menu, make_product):
        menu = await make_menu()
        rice = await make_product("Rice", "5.00")
        menu = await menu_line.add_ingredient(db, menu.id, MenuIngredientCreate(product_id=rice.id, per_capita="1"))

        updated = await product_crud.update_product(db, rice.id, ProductUpdate(price=Decimal("9.00")))
        assert updated.price == Decimal("9.00")

        menu = await menu_line.add_ingredient(db, menu.id, MenuIngredientCreate(product_id=rice.id, per_capita="1"))
        costs = sorted(i.cost for i in menu.ingredients)
        assert costs == [Decimal("5.00"), Decimal("9.00")]
        assert menu.total_cost == Decimal("14.00")

    async def test_unknown_product(self, db, make_menu):
        menu = await make_menu()
        with pytest.raises(NotFoundError):
            await menu_line.add_ingredient(db, menu.id, MenuIngredientCreate(product_id="nope", per_capita="1"))

    async def test_unknown_menu(self, db, make_product):
        rice = await make_product()
        with pytest.raises(NotFoundError):
            await menu_line.add_ingredient(db, "nope", MenuIngredientCreate(product_id=rice.id, per_capita="1"))

    async def test_remove_ingredient_of_another_menu(self, db, make_menu, make_product):
        first = await make_menu(date(2026, 3, 2))
        second = await make_menu(date(2026, 3, 3))
        rice = await make_product()
        first = await menu_line.add_ingredient(db, first.id, MenuIngredientCreate(product_id=rice.id, per_capita="1"))

        with pytest.raises(NotFoundError):
            await menu_line.remove_ingredient(db, second.id, first.ingredients[0].id)

    def test_per_capita_must_be_positive(self):
        with pytest.raises(ValueError):
            MenuIngredientCreate(product_id="p", per_capita="0")


class TestKits:
    async def test_stale_total_is_replaced_not_subtracted(self, db, make_menu, make_kit):
        menu = await make_menu(total_cost="1.00")
        milk = await make_kit("Milk", "3.00")

        menu, _ = await menu_line.toggle_kit(db, menu.id, milk.id)
        assert menu.total_cost == Decimal("3.00")

        # drift the stored total below the kit cost, then unlink the kit
        menu.total_cost = Decimal("1.00")
        await db.commit()
        menu, linked = await menu_line.toggle_kit(db, menu.id, milk.id)

        assert linked is False
        assert menu.total_cost == Decimal("0")

    async def test_total_never_negative(self, db, make_menu, make_product, make_kit):
        menu = await make_menu()
        rice = await make_product()
        db.add(MenuIngredient(id=str(uuid.uuid4()), menu_id=menu.id, product_id=rice.id,
                              per_capita=Decimal("1"), cost=Decimal("-5")))
        await db.commit()
        milk = await make_kit("Milk", "1.00")

        menu, _ = await menu_line.toggle_kit(db, menu.id, milk.id)
        assert menu.total_cost == Decimal("0")

    async def test_kit_cost_frozen_at_link_time(self, db, make_menu, make_kit):
        menu = await make_menu()
        milk = await make_kit("Milk", "0.60")
        menu, _ = await menu_line.toggle_kit(db, menu.id, milk.id)

        milk.price = Decimal("0.90")
        await db.commit()

        menu = await menu_line.get_menu(db, menu.id)
        assert menu.kits[0].cost == Decimal("0.60")
        assert menu.total_cost == Decimal("0.60")

    async def test_unknown_kit(self, db, make_menu):
        menu = await make_menu()
        with pytest.raises(NotFoundError):
            await menu_line.toggle_kit(db, menu.id, "nope")
