from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy import delete
from menucost.models import Profile, UserRole
from menucost.core.constants import ROLE_PRECEDENCE
from menucost.core.errors import NotFoundError
import uuid
import logging

log = logging.getLogger(__name__)


def display_role(roles):
    """Single role shown for a user: the most privileged one held"""
    held = {r.role for r in roles}
    for role in ROLE_PRECEDENCE:
        if role in held:
            return role
    return None


async def get_profile(db: AsyncSession, user_id: str):
    result = await db.execute(
        select(Profile)
        .where(Profile.id == user_id)
        .options(selectinload(Profile.roles))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_profile(db: AsyncSession, user_id: str, full_name: str = None, email: str = None):
    profile = Profile(id=user_id, full_name=full_name, email=email)
    db.add(profile)
    await db.commit()
    return await get_profile(db, user_id)


async def get_users(db: AsyncSession):
    """Every profile with the role it is displayed under (or None)"""
    result = await db.execute(
        select(Profile)
        .options(selectinload(Profile.roles))
        .order_by(Profile.full_name, Profile.created_at)
    )
    return [
        {
            "id": profile.id,
            "full_name": profile.full_name,
            "email": profile.email,
            "role": display_role(profile.roles),
            "created_at": profile.created_at,
        }
        for profile in result.scalars().all()
    ]


async def get_roles(db: AsyncSession, user_id: str):
    result = await db.execute(select(UserRole.role).where(UserRole.user_id == user_id))
    return list(result.scalars().all())


async def set_user_role(db: AsyncSession, user_id: str, role: str = None):
    """Replace every role of a user with ``role``; None leaves the user without roles"""
    profile = await db.get(Profile, user_id)
    if not profile:
        raise NotFoundError("User not found")

    await db.execute(delete(UserRole).where(UserRole.user_id == user_id))
    if role:
        db.add(UserRole(id=str(uuid.uuid4()), user_id=user_id, role=role))

    await db.commit()
    log.info("user role set: user=%s role=%s", user_id, role)
    return await get_profile(db, user_id)
