from sqlalchemy import Column, String, Boolean, DateTime, Numeric
from sqlalchemy.orm import relationship
from datetime import datetime
from menucost.models.base import Base
import uuid


class Kit(Base):
    """Fixed per-capita add-on (bread, milk allowance, ...) linked to menus."""
    __tablename__ = "kits"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, unique=True)
    price = Column(Numeric(12, 4), nullable=False, default=0)
    is_default = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    menu_links = relationship("MenuKit", back_populates="kit")
