"""Cart ORM — one document per user, keyed by email.

Invariants:
    - email is the primary key: at most one cart per user
    - cart_items is a JSON list of {"product": <snapshot>, "quantity": int}
    - cart_items is only ever REASSIGNED (never mutated in place) so the ORM sees the change
    - version bumps on every UPDATE; a stale write raises StaleDataError

Design Decisions:
    - Line items embedded as JSON, not a join table: price is frozen at add time
"""

from sqlalchemy import String, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.config import get_settings
from app.db.base import Base


class Cart(Base):
    """Shopping cart aggregate."""
    __tablename__ = "carts"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    cart_items: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    payment_option: Mapped[str] = mapped_column(
        String(50), nullable=False,
        default=lambda: get_settings().default_payment_option,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
