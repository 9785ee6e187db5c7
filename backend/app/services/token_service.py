"""Token Service — issues and verifies signed, time-bounded JWTs.

Invariants:
    - Payload carries sub (user id), type, exp, iat (whole epoch seconds)
    - generate_auth_tokens reports `expires` from the same epoch value it signs into exp
    - verify_token rejects bad signature, expiry, missing claims and wrong type alike
    - Signing failures surface as InternalError
"""

import logging
import time

import jwt

from app.config import get_settings
from app.core.domain_types import TokenType
from app.core.errors import InternalError, UnauthorizedError
from app.core.token_claims import build_token_payload, compute_expiry

logger = logging.getLogger(__name__)


def generate_token(
    user_id, expires: int, token_type: TokenType, secret: str | None = None,
) -> str:
    """Sign a token for user_id expiring at `expires` (epoch seconds)."""
    settings = get_settings()
    payload = build_token_payload(str(user_id), expires, token_type, time.time())
    try:
        return jwt.encode(
            payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm,
        )
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        logger.error(f"Token signing failed: {e}")
        raise InternalError("Could not issue token")


def generate_auth_tokens(user) -> dict:
    """Issue an access token for user.

    Returns {"access": {"token": str, "expires": datetime}}.
    """
    settings = get_settings()
    expires_at, expires = compute_expiry(
        time.time(), settings.jwt_access_expiration_minutes,
    )
    token = generate_token(user.id, expires_at, TokenType.ACCESS)
    return {"access": {"token": token, "expires": expires}}


def verify_token(
    token: str,
    expected_type: TokenType = TokenType.ACCESS,
    secret: str | None = None,
) -> dict:
    """Decode and validate a token, returning its claims."""
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            secret or settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.PyJWTError as e:
        logger.info(f"Token rejected: {e}")
        raise UnauthorizedError()
    if claims.get("type") != expected_type.value:
        raise UnauthorizedError()
    return claims
