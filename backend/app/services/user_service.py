"""User Service — user lookup and shipping address updates.

Invariants:
    - set_address shares the per-user lock with cart mutations (checkout reads the address)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.keyed_locks import KeyedLocks, user_locks
from app.infrastructure.sql_repositories import parse_uuid
from app.models.user import User

logger = logging.getLogger(__name__)


async def get_user_by_id(db: AsyncSession, user_id) -> User | None:
    uid = parse_uuid(user_id)
    if uid is None:
        return None
    return await db.get(User, uid)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def set_address(
    db: AsyncSession, user: User, address: str, locks: KeyedLocks | None = None,
) -> User:
    async with (locks or user_locks).hold(user.email):
        await db.refresh(user)
        user.address = address
        await db.commit()
    logger.info("Address updated", extra={"user_email": user.email})
    return user
