"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProductId wrap UUIDs — never use bare UUID in domain logic
    - Money is an int in whole currency units (exact arithmetic, no float drift)
    - Token types encoded as an Enum — no raw string matching
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProductId = NewType("ProductId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", int)

# bcrypt hashes at most this many bytes of a UTF-8 password
MAX_PASSWORD_BYTES = 72


# ─── Enums ───────────────────────────────────────────────────────

class TokenType(str, Enum):
    """JWT `type` claim values. Only ACCESS is issued today."""
    ACCESS = "access"
    REFRESH = "refresh"
    RESET_PASSWORD = "resetPassword"
    VERIFY_EMAIL = "verifyEmail"

