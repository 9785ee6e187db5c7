"""SQL Repositories — SQLAlchemy implementations of the cart engine's store protocols.

Invariants:
    - Stores never commit: the caller owns the transaction boundary
    - save() flushes so constraint and version violations surface at the call site
    - StaleDataError / IntegrityError on flush map to ConflictError; other DB failures to DatabaseError
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.core.errors import ConflictError, DatabaseError, ErrorContext
from app.models.cart import Cart
from app.models.product import Product

logger = logging.getLogger(__name__)


def parse_uuid(value) -> UUID | None:
    """Coerce a path/body id into a UUID; None when it is not one."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


class SqlProductCatalog:
    """Product Catalog Lookup backed by the products table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, product_id) -> Product | None:
        pid = parse_uuid(product_id)
        if pid is None:
            return None
        return await self.db.get(Product, pid)

    async def list_all(self) -> list[Product]:
        result = await self.db.execute(select(Product).order_by(Product.name))
        return list(result.scalars().all())


class SqlCartStore:
    """Cart Store backed by the carts table (email-keyed documents)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Cart | None:
        result = await self.db.execute(
            select(Cart)
            .where(Cart.email == email)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def create(self, cart_data: dict) -> Cart:
        cart = Cart(**cart_data)
        self.db.add(cart)
        await self._flush(cart, "insert")
        return cart

    async def save(self, cart: Cart) -> Cart:
        self.db.add(cart)
        await self._flush(cart, "update")
        return cart

    async def _flush(self, cart: Cart, operation: str) -> None:
        # rollback expires cart; its attributes cannot be read afterwards
        email = cart.email
        try:
            await self.db.flush()
        except (StaleDataError, IntegrityError) as e:
            await self.db.rollback()
            logger.warning(
                f"Cart {operation} conflicted: {e}",
                extra={"user_email": email},
            )
            raise ConflictError(
                "Cart was modified concurrently, retry the request",
                ErrorContext(user_email=email),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Cart {operation} failed: {e}",
                extra={"user_email": email},
            )
            raise DatabaseError("Cart could not be persisted", operation)
