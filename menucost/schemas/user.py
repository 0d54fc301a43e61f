from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from enum import Enum


class RoleName(str, Enum):
    admin = "admin"
    pcp = "pcp"
    user = "user"


class UserRead(BaseModel):
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[RoleName] = None
    created_at: Optional[datetime] = None


class SetUserRole(BaseModel):
    role: Optional[RoleName] = None  # None clears every role


class CurrentUserRead(BaseModel):
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    roles: List[RoleName] = []
    is_admin: bool
    is_pcp: bool
    is_user: bool
    can_edit: bool
