from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from moodjournal.database import get_db
from moodjournal.models.user import User
from moodjournal.config import settings
from moodjournal.core.errors import Unauthorized

reusable_oauth2 = HTTPBearer(auto_error=False)

async def get_current_user(
    db: AsyncSession = Depends(get_db),
    token: Optional[HTTPAuthorizationCredentials] = Depends(reusable_oauth2)
) -> User:
    if token is None:
        raise Unauthorized()
    try:
        payload = jwt.decode(
            token.credentials,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise Unauthorized("Could not validate credentials")

    user_id = payload.get("sub")
    if user_id is None or payload.get("type", "access") != "access":
        raise Unauthorized("Could not validate credentials")

    try:
        user_pk = int(user_id)
    except (TypeError, ValueError):
        raise Unauthorized("Could not validate credentials")

    result = await db.execute(select(User).where(User.id == user_pk))
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        raise Unauthorized("Could not validate credentials")
    return user
