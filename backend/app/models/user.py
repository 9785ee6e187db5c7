"""User ORM — authenticated identity, wallet balance and shipping address.

Invariants:
    - email is unique (login key and cart key)
    - password holds a bcrypt hash, never plaintext
    - wallet_money is a non-negative integer; checkout is its only debit
    - address defaults to the configured sentinel until the user sets one
    - version bumps on every UPDATE; a stale write raises StaleDataError
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.config import get_settings
from app.db.base import Base


class User(Base):
    """Customer account."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    wallet_money: Mapped[int] = mapped_column(
        Integer, nullable=False,
        default=lambda: get_settings().default_wallet_money,
    )
    address: Mapped[str] = mapped_column(
        Text, nullable=False,
        default=lambda: get_settings().default_address,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def has_set_non_default_address(self) -> bool:
        """True once the user replaced the sentinel with a real address."""
        return bool(self.address) and self.address != get_settings().default_address
