from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from menucost.schemas import UserRead, SetUserRole, CurrentUserRead
from menucost.crud import user as user_crud
from menucost.db import get_db
from menucost.auth.dependencies import get_current_user
from menucost.auth.policy import Action, require, roles_of, capabilities
from menucost.core.cache import query_cache
from menucost.core.constants import ROLE_PRECEDENCE, SCOPE_USERS

router = APIRouter()


@router.get("/users", response_model=List[UserRead])
async def list_users(
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.manage_users))
):
    key = (SCOPE_USERS, "all")
    cached = query_cache.get(key)
    if cached is not None:
        return cached

    users = await user_crud.get_users(db)
    query_cache.set(key, users)
    return users


@router.put("/users/{user_id}/role", response_model=UserRead)
async def set_user_role(
    user_id: str,
    payload: SetUserRole,
    db: AsyncSession = Depends(get_db),
    user=Depends(require(Action.manage_users))
):
    """Replace the user's roles with one role, or clear them with null"""
    role = payload.role.value if payload.role else None
    profile = await user_crud.set_user_role(db, user_id, role)
    query_cache.invalidate(SCOPE_USERS)
    return UserRead(
        id=profile.id,
        full_name=profile.full_name,
        email=profile.email,
        role=user_crud.display_role(profile.roles),
        created_at=profile.created_at
    )


@router.get("/me", response_model=CurrentUserRead)
async def read_current_user(user=Depends(get_current_user)):
    roles = roles_of(user)
    return CurrentUserRead(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        roles=[r for r in ROLE_PRECEDENCE if r in roles],
        **capabilities(roles)
    )
