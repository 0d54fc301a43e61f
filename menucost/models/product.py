from sqlalchemy import Column, String, ForeignKey, DateTime, Numeric, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from menucost.models.base import Base
import uuid


class Product(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    category_id = Column(String, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    unit = Column(String, nullable=False)  # kg, l, un, ...
    price = Column(Numeric(12, 4), nullable=False, default=0)
    price_updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category", back_populates="products")
    menu_ingredients = relationship("MenuIngredient", back_populates="product")

    __table_args__ = (
        Index("idx_products_name", "name"),
        Index("idx_products_category", "category_id"),
    )
