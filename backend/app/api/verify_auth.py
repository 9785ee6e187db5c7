"""Auth Verification — resolves `Authorization: Bearer <token>` into the current User.

Invariants:
    - pending -> authenticated | rejected; rejected is terminal and the route never runs
    - Every rejection (missing header, bad signature, expired, wrong type, unknown user)
      is UnauthorizedError("Please authenticate")
    - Runs as a FastAPI dependency, so it completes before any cart operation
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TokenType
from app.core.errors import UnauthorizedError
from app.infrastructure.database import get_db
from app.models.user import User
from app.services.token_service import verify_token
from app.services.user_service import get_user_by_id

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate_token(db: AsyncSession, token: str | None) -> User:
    """Verify token and load its subject."""
    if not token:
        raise UnauthorizedError()
    claims = verify_token(token, TokenType.ACCESS)
    user = await get_user_by_id(db, claims["sub"])
    if user is None:
        logger.info("Token subject no longer exists")
        raise UnauthorizedError()
    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """FastAPI dependency for authenticated routes."""
    token = credentials.credentials if credentials else None
    return await authenticate_token(db, token)
