from sqlalchemy import Column, String, ForeignKey, DateTime, Date, Text, Numeric, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from menucost.models.base import Base
import uuid


class DailyMenu(Base):
    __tablename__ = "daily_menus"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    menu_date = Column(Date, nullable=False)
    menu_type_id = Column(String, ForeignKey("menu_types.id"), nullable=True)
    description = Column(Text, nullable=True)
    # Per-capita cost, kept equal to the sum of the line items below
    total_cost = Column(Numeric(12, 4), nullable=False, default=0)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    menu_type = relationship("MenuType", back_populates="menus")
    ingredients = relationship(
        "MenuIngredient",
        back_populates="menu",
        cascade="all, delete-orphan",
        order_by="MenuIngredient.created_at",
    )
    kits = relationship(
        "MenuKit",
        back_populates="menu",
        cascade="all, delete-orphan",
        order_by="MenuKit.created_at",
    )

    __table_args__ = (
        UniqueConstraint("menu_date", "menu_type_id", name="uq_daily_menu_date_type"),
        Index("idx_daily_menus_date", "menu_date"),
        Index("idx_daily_menus_type", "menu_type_id", "menu_date"),
    )


class MenuIngredient(Base):
    __tablename__ = "menu_ingredients"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    menu_id = Column(String, ForeignKey("daily_menus.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String, ForeignKey("products.id"), nullable=False)
    per_capita = Column(Numeric(12, 4), nullable=False)
    cost = Column(Numeric(12, 4), nullable=False)  # frozen: per_capita x price at insert time
    created_at = Column(DateTime, default=datetime.utcnow)

    menu = relationship("DailyMenu", back_populates="ingredients")
    product = relationship("Product", back_populates="menu_ingredients")

    __table_args__ = (
        Index("idx_menu_ingredients_menu", "menu_id"),
    )


class MenuKit(Base):
    __tablename__ = "menu_kits"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    menu_id = Column(String, ForeignKey("daily_menus.id", ondelete="CASCADE"), nullable=False)
    kit_id = Column(String, ForeignKey("kits.id"), nullable=False)
    cost = Column(Numeric(12, 4), nullable=False)  # frozen: kit price at link time
    created_at = Column(DateTime, default=datetime.utcnow)

    menu = relationship("DailyMenu", back_populates="kits")
    kit = relationship("Kit", back_populates="menu_links")

    __table_args__ = (
        UniqueConstraint("menu_id", "kit_id", name="uq_menu_kit"),
        Index("idx_menu_kits_menu", "menu_id"),
    )
