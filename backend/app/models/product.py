"""Product ORM — catalog entry, read-only for the cart engine.

Invariants:
    - cost is a non-negative integer in whole currency units
    - to_snapshot() is the frozen copy embedded into cart line items
"""

import uuid

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Product(Base):
    """Catalog product."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    cost: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    def to_snapshot(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "category": self.category,
            "cost": self.cost,
            "rating": self.rating,
            "image": self.image,
        }
