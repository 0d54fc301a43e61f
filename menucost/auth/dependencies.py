# auth/dependencies.py
from fastapi import Request, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from menucost.db import get_db
from menucost.crud import user as user_crud


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)):
    """Profile of the signed-in user; the identity provider stores user_id in the session"""
    user_id = request.session.get("user_id")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    profile = await user_crud.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile
