"""Unit tests for report aggregations over plain menu objects."""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from menucost.services import reports


def _menu(day, cost, menu_type_id=None, description=None, ingredients=(), kits=()):
    return SimpleNamespace(
        menu_date=day,
        menu_type_id=menu_type_id,
        total_cost=Decimal(str(cost)),
        description=description,
        ingredients=list(ingredients),
        kits=list(kits),
    )


def _ingredient(cost, category=None):
    product = SimpleNamespace(category=SimpleNamespace(name=category) if category else None)
    return SimpleNamespace(cost=Decimal(str(cost)), product=product)


def _kit_link(cost, name):
    return SimpleNamespace(cost=Decimal(str(cost)), kit=SimpleNamespace(name=name))


class TestSummaries:
    def test_average_ignores_unplanned_days(self):
        menus = [_menu(date(2026, 3, d), c) for d, c in [(2, 0), (3, 10), (4, 0), (5, 20)]]
        summary = reports.summarize(menus)
        assert summary["total_cost"] == Decimal("30")
        assert summary["days_planned"] == 2
        assert summary["average_cost"] == Decimal("15")

    def test_empty_month_has_zero_average(self):
        assert reports.summarize([]) == {
            "total_cost": Decimal("0"),
            "days_planned": 0,
            "average_cost": Decimal("0"),
        }

    def test_monthly_stats_include_business_days(self):
        stats = reports.monthly_stats([_menu(date(2026, 3, 2), 4)], 2026, 3)
        assert stats["business_days"] == 22
        assert stats["days_planned"] == 1

    def test_daily_series_skips_unplanned_and_labels_blank_descriptions(self):
        menus = [
            _menu(date(2026, 3, 2), 0, description="empty"),
            _menu(date(2026, 3, 3), 5),
            _menu(date(2026, 3, 4), 6, description="Rice and beans"),
        ]
        series = reports.daily_series(menus)
        assert [row["menu_date"] for row in series] == [date(2026, 3, 3), date(2026, 3, 4)]
        assert series[0]["description"] == "No description"
        assert series[1]["description"] == "Rice and beans"

    def test_daily_series_is_limited(self):
        menus = [_menu(date(2026, 3, d), 1) for d in range(1, 21)]
        assert len(reports.daily_series(menus)) == 15

    def test_recent_menus_are_latest_planned_first(self):
        menus = [_menu(date(2026, 3, d), 0 if d == 9 else 1) for d in range(1, 10)]
        recent = reports.recent_menus(menus)
        assert [m.menu_date.day for m in recent] == [8, 7, 6, 5, 4]


class TestBreakdowns:
    def test_category_breakdown_sums_and_sorts_descending(self):
        menus = [
            _menu(date(2026, 3, 2), 7, ingredients=[_ingredient(5, "A"), _ingredient(2, "B")]),
            _menu(date(2026, 3, 3), 3, ingredients=[_ingredient(3, "A")]),
        ]
        rows = reports.category_breakdown(menus)
        assert [(r["name"], r["value"]) for r in rows] == [("A", Decimal("8")), ("B", Decimal("2"))]
        assert rows[0]["share"] == Decimal("80.0")
        assert rows[1]["share"] == Decimal("20.0")

    def test_ingredient_without_category_is_uncategorized(self):
        rows = reports.category_breakdown([_menu(date(2026, 3, 2), 1, ingredients=[_ingredient(1)])])
        assert rows[0]["name"] == "Uncategorized"

    def test_share_is_none_without_costs(self):
        rows = reports.category_breakdown([_menu(date(2026, 3, 2), 0, ingredients=[_ingredient(0, "A")])])
        assert rows[0]["share"] is None

    def test_line_item_breakdown_groups_ingredients_and_names_kits(self):
        menus = [
            _menu(
                date(2026, 3, 2), 4.5,
                ingredients=[_ingredient(1.5, "A"), _ingredient(2, "B")],
                kits=[_kit_link(0.6, "Milk"), _kit_link(0.4, "Bread")],
            ),
        ]
        rows = reports.line_item_breakdown(menus)
        assert [(r["name"], r["value"]) for r in rows] == [
            ("Ingredients", Decimal("3.5")),
            ("Milk", Decimal("0.6")),
            ("Bread", Decimal("0.4")),
        ]

    def test_type_comparison_has_no_type_bucket_and_drops_empty_types(self):
        types = [SimpleNamespace(id="t1", name="Daycare"), SimpleNamespace(id="t2", name="Elementary")]
        menus = [
            _menu(date(2026, 3, 2), 10, "t1"),
            _menu(date(2026, 3, 3), 20, "t1"),
            _menu(date(2026, 3, 3), 0, "t2"),
            _menu(date(2026, 3, 4), 6, None),
        ]
        rows = reports.type_comparison(menus, types)
        assert [r["name"] for r in rows] == ["Daycare", "No type"]
        assert rows[0]["average_cost"] == Decimal("15")
        assert rows[0]["days_planned"] == 2
        assert rows[1]["menu_type_id"] is None


class TestAnnual:
    def _year(self):
        return [
            _menu(date(2026, 1, 5), 10),
            _menu(date(2026, 1, 6), 10),
            _menu(date(2026, 2, 2), 15),
            _menu(date(2026, 2, 3), 0),
        ]

    def test_twelve_months_with_variation(self):
        rows = reports.monthly_breakdown(self._year())
        assert len(rows) == 12
        assert rows[0]["name"] == "January"
        assert rows[0]["variation"] is None
        assert rows[1]["average_cost"] == Decimal("15")
        assert rows[1]["variation"] == Decimal("50.0")
        # April follows a month without an average
        assert rows[3]["variation"] is None

    def test_extreme_months(self):
        rows = reports.monthly_breakdown(self._year())
        most_expensive, cheapest = reports.extreme_months(rows)
        assert most_expensive["month"] == 2
        assert cheapest["month"] == 1

    def test_extremes_are_none_without_data(self):
        assert reports.extreme_months(reports.monthly_breakdown([])) == (None, None)

    def test_annual_stats(self):
        stats = reports.annual_stats(self._year())
        assert stats["total_cost"] == Decimal("35")
        assert stats["days_planned"] == 3
        assert stats["average_cost"] == Decimal("11.6667")
        assert stats["most_expensive"]["name"] == "February"

    def test_type_comparison_by_month_respects_selection(self):
        types = [SimpleNamespace(id="t1", name="Daycare"), SimpleNamespace(id="t2", name="Elementary")]
        menus = [_menu(date(2026, 1, 5), 8, "t1"), _menu(date(2026, 1, 6), 4, "t2")]
        rows = reports.type_comparison_by_month(menus, types, ["t2"])
        assert rows[0]["name"] == "Jan"
        assert rows[0]["averages"] == {"Elementary": Decimal("4")}
        assert rows[1]["averages"] == {"Elementary": Decimal("0")}
