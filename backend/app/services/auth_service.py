"""Auth Service — registration and email/password login.

Invariants:
    - Passwords are stored as bcrypt hashes only
    - Unknown email and wrong password produce the SAME error (no account probing)
    - New users start with the configured wallet balance and the default address sentinel
"""

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MAX_PASSWORD_BYTES
from app.core.errors import BadRequestError, UnauthorizedError
from app.models.user import User
from app.services.user_service import get_user_by_email

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already taken"
BAD_CREDENTIALS = "Incorrect email or password"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def is_password_match(password: str, hashed: str) -> bool:
    """False for anything bcrypt could not have hashed (over MAX_PASSWORD_BYTES)."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


async def register_user(
    db: AsyncSession, name: str, email: str, password: str,
) -> User:
    if await get_user_by_email(db, email) is not None:
        raise BadRequestError(EMAIL_TAKEN)
    user = User(name=name, email=email, password=hash_password(password))
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        await db.rollback()
        raise BadRequestError(EMAIL_TAKEN)
    await db.refresh(user)
    logger.info("User registered", extra={"user_email": email})
    return user


async def login_user_with_email_and_password(
    db: AsyncSession, email: str, password: str,
) -> User:
    user = await get_user_by_email(db, email)
    if user is None or not is_password_match(password, user.password):
        raise UnauthorizedError(BAD_CREDENTIALS)
    return user
