"""Token Claims — pure construction of JWT payloads and expiry instants.

Invariants:
    - exp and iat are whole epoch seconds
    - The calendar `expires` timestamp is derived from the same epoch value signed into `exp`
"""

from datetime import datetime, timezone

from app.core.domain_types import TokenType


def compute_expiry(now_seconds: float, lifetime_minutes: int) -> tuple[int, datetime]:
    """Return (exp epoch seconds, matching UTC datetime)."""
    expires_at = int(now_seconds) + lifetime_minutes * 60
    return expires_at, datetime.fromtimestamp(expires_at, tz=timezone.utc)


def build_token_payload(
    user_id: str, expires_at: int, token_type: TokenType, issued_at: float,
) -> dict:
    return {
        "sub": str(user_id),
        "type": token_type.value,
        "exp": int(expires_at),
        "iat": int(issued_at),
    }
