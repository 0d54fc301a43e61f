from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class MenuTypeBase(BaseModel):
    name: str
    description: Optional[str] = None


class MenuTypeCreate(MenuTypeBase):
    pass


class MenuTypeUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class MenuTypeRead(MenuTypeBase):
    id: str
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MenuTypeSummary(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True
