"""
Menu Duplication Service

Copies daily menus to other dates or menu types:
- one menu to a new date (and optionally a new type)
- every menu of one type within a month onto another type

Copies carry description, total_cost and every line item with its frozen
cost; nothing is re-priced.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from menucost.models import DailyMenu, MenuIngredient, MenuKit
from menucost.crud import daily_menu as menu_crud
from menucost.crud import menu_type as menu_type_crud
from menucost.core.errors import ConflictError, NotFoundError, NoSourceMenusError
from menucost.schemas import DuplicationOutcome, DuplicationReport, DuplicationStatus
from datetime import date
from typing import Optional
import uuid
import logging

log = logging.getLogger(__name__)


class MenuDuplicator:
    """Duplicates daily menus with their ingredients and kits"""

    def __init__(self, db: AsyncSession, created_by: Optional[str] = None):
        self.db = db
        self.created_by = created_by

    async def _copy_menu(self, source: DailyMenu, target_date: date, menu_type_id: Optional[str]) -> DailyMenu:
        """Stage a copy of ``source`` in the session (no commit)"""
        new_menu = DailyMenu(
            id=str(uuid.uuid4()),
            menu_date=target_date,
            menu_type_id=menu_type_id,
            description=source.description,
            total_cost=source.total_cost,
            created_by=self.created_by
        )
        self.db.add(new_menu)

        for ingredient in source.ingredients:
            self.db.add(MenuIngredient(
                id=str(uuid.uuid4()),
                menu_id=new_menu.id,
                product_id=ingredient.product_id,
                per_capita=ingredient.per_capita,
                cost=ingredient.cost
            ))

        for link in source.kits:
            self.db.add(MenuKit(
                id=str(uuid.uuid4()),
                menu_id=new_menu.id,
                kit_id=link.kit_id,
                cost=link.cost
            ))

        await self.db.flush()
        return new_menu

    async def _require_type(self, menu_type_id: str):
        menu_type = await menu_type_crud.get_menu_type(self.db, menu_type_id)
        if not menu_type:
            raise NotFoundError("Menu type not found")
        return menu_type

    async def duplicate_menu(
        self,
        source_menu_id: str,
        target_date: date,
        target_menu_type_id: Optional[str] = None
    ) -> DailyMenu:
        """
        Copy one menu to ``target_date``. The type defaults to the source's.
        Fails with ConflictError, creating nothing, when the target slot is taken.
        The copy and its line items commit together.
        """
        source = await menu_crud.get_menu(self.db, source_menu_id)
        if not source:
            raise NotFoundError("Source menu not found")

        if target_menu_type_id is not None:
            await self._require_type(target_menu_type_id)
            menu_type_id = target_menu_type_id
        else:
            menu_type_id = source.menu_type_id

        await menu_crud.ensure_slot_free(self.db, target_date, menu_type_id)

        try:
            new_menu = await self._copy_menu(source, target_date, menu_type_id)
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            slot = await menu_crud.describe_slot(self.db, target_date, menu_type_id)
            raise ConflictError(f"A menu already exists on {slot}")
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        log.info("duplicate_menu: source=%s new=%s date=%s type=%s",
                 source.id, new_menu.id, target_date, menu_type_id)
        return await menu_crud.get_menu(self.db, new_menu.id)

    async def duplicate_menu_type(
        self,
        source_menu_type_id: str,
        target_menu_type_id: str,
        year: int,
        month: int
    ) -> DuplicationReport:
        """
        Copy every menu of the source type in a month onto the target type,
        keeping dates. Taken dates are skipped; a store failure on one date is
        rolled back to its savepoint and reported, the rest still go through.
        """
        source_type = await self._require_type(source_menu_type_id)
        target_type = await self._require_type(target_menu_type_id)
        if source_type.id == target_type.id:
            raise ConflictError("Source and target menu types must be different")

        sources = await menu_crud.get_month_menus(self.db, year, month, source_type.id)
        if not sources:
            raise NoSourceMenusError(
                f"No menus of type '{source_type.name}' found in {month:02d}/{year}"
            )

        outcomes = []
        for menu in sources:
            if await menu_crud.find_menu_at(self.db, menu.menu_date, target_type.id):
                log.warning("duplicate_menu_type: skipped %s, '%s' already has a menu",
                            menu.menu_date, target_type.name)
                outcomes.append(DuplicationOutcome(
                    menu_date=menu.menu_date,
                    source_menu_id=menu.id,
                    status=DuplicationStatus.skipped,
                    message="A menu already exists on this date for the target type"
                ))
                continue

            try:
                async with self.db.begin_nested():
                    new_menu = await self._copy_menu(menu, menu.menu_date, target_type.id)
            except SQLAlchemyError as exc:
                log.warning("duplicate_menu_type: failed %s: %s", menu.menu_date, exc)
                outcomes.append(DuplicationOutcome(
                    menu_date=menu.menu_date,
                    source_menu_id=menu.id,
                    status=DuplicationStatus.failed,
                    message=str(exc)
                ))
                continue

            outcomes.append(DuplicationOutcome(
                menu_date=menu.menu_date,
                source_menu_id=menu.id,
                status=DuplicationStatus.duplicated,
                new_menu_id=new_menu.id
            ))

        await self.db.commit()

        report = DuplicationReport.from_outcomes(outcomes)
        log.info("duplicate_menu_type: %s -> %s %02d/%d duplicated=%d skipped=%d failed=%d",
                 source_type.name, target_type.name, month, year,
                 report.duplicated_count, report.skipped_count, report.failed_count)
        return report
