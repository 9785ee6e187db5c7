"""Cart Service — cart lifecycle and the checkout transaction.

Invariants:
    - Every mutation runs while holding the owner's per-user lock
    - The user row is re-read inside the lock (wallet/address may have changed since auth)
    - Checkout debits the wallet and empties the cart in ONE commit; any failure rolls back both
    - Stale versions on users/carts surface as ConflictError, never as a silent overwrite
    - Error messages are fixed strings (clients match on them)
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.config import get_settings
from app.core import cart_rules
from app.core.errors import (
    BadRequestError, ConflictError, DatabaseError, ErrorContext, NotFoundError,
)
from app.core.repository_protocols import CartStore, ProductCatalog, UserContext
from app.infrastructure.keyed_locks import KeyedLocks, user_locks
from app.infrastructure.sql_repositories import (
    SqlCartStore, SqlProductCatalog, parse_uuid,
)
from app.models.cart import Cart

logger = logging.getLogger(__name__)

NO_CART = "User does not have a cart"
NO_CART_FOR_UPDATE = (
    "User does not have a cart. Use POST to create cart and add a product"
)
UNKNOWN_PRODUCT = "Product doesn't exist in database"


def _line_key(product_id) -> str:
    """Canonical id used to match line items (snapshots store str(UUID))."""
    pid = parse_uuid(product_id)
    return str(pid) if pid is not None else str(product_id)


class CartService:
    """Per-request cart operations over one DB session."""

    def __init__(
        self,
        db: AsyncSession,
        carts: CartStore | None = None,
        catalog: ProductCatalog | None = None,
        locks: KeyedLocks | None = None,
    ):
        self.db = db
        self.carts = carts or SqlCartStore(db)
        self.catalog = catalog or SqlProductCatalog(db)
        self.locks = locks or user_locks

    async def get_cart_by_user(self, user: UserContext) -> Cart:
        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            raise NotFoundError(NO_CART, ErrorContext(user_email=user.email))
        return cart

    async def create_new_cart(self, user: UserContext) -> Cart:
        """Create an empty cart with the default payment option (not committed)."""
        return await self.carts.create({
            "email": user.email,
            "cart_items": [],
            "payment_option": get_settings().default_payment_option,
        })

    async def add_product_to_cart(
        self, user: UserContext, product_id, quantity: int,
    ) -> Cart:
        async with self.locks.hold(user.email):
            product = await self.catalog.find_by_id(product_id)
            if product is None:
                raise BadRequestError(
                    UNKNOWN_PRODUCT, ErrorContext(product_id=str(product_id)),
                )
            cart = await self.carts.find_by_email(user.email)
            if cart is None:
                cart = await self.create_new_cart(user)
            cart.cart_items = cart_rules.append_line_item(
                cart.cart_items, product.to_snapshot(), quantity, user.email,
            )
            await self.carts.save(cart)
            await self._commit(user, "add_product")
        logger.info(
            "Product added to cart",
            extra={"user_email": user.email, "product_id": str(product_id), "quantity": quantity},
        )
        return cart

    async def update_product_in_cart(
        self, user: UserContext, product_id, quantity: int,
    ) -> Cart:
        async with self.locks.hold(user.email):
            cart = await self.carts.find_by_email(user.email)
            if cart is None:
                raise BadRequestError(
                    NO_CART_FOR_UPDATE, ErrorContext(user_email=user.email),
                )
            product = await self.catalog.find_by_id(product_id)
            if product is None:
                raise BadRequestError(
                    UNKNOWN_PRODUCT, ErrorContext(product_id=str(product_id)),
                )
            updated = cart_rules.set_line_item_quantity(
                cart.cart_items, str(product.id), quantity, user.email,
            )
            if updated != cart.cart_items:
                cart.cart_items = updated
                await self.carts.save(cart)
                await self._commit(user, "update_product")
        logger.info(
            "Cart quantity updated",
            extra={"user_email": user.email, "product_id": str(product_id), "quantity": quantity},
        )
        return cart

    async def delete_product_from_cart(self, user: UserContext, product_id) -> None:
        async with self.locks.hold(user.email):
            cart = await self.carts.find_by_email(user.email)
            if cart is None:
                raise BadRequestError(NO_CART, ErrorContext(user_email=user.email))
            cart.cart_items = cart_rules.remove_line_item(
                cart.cart_items, _line_key(product_id), user.email,
            )
            await self.carts.save(cart)
            await self._commit(user, "delete_product")
        logger.info(
            "Product removed from cart",
            extra={"user_email": user.email, "product_id": str(product_id)},
        )

    async def checkout(self, user: UserContext) -> None:
        """Debit the wallet by the cart total and empty the cart, atomically."""
        async with self.locks.hold(user.email):
            await self.db.refresh(user)
            cart = await self.carts.find_by_email(user.email)
            if cart is None:
                raise NotFoundError(NO_CART, ErrorContext(user_email=user.email))
            total = cart_rules.evaluate_checkout(
                cart.cart_items,
                user.has_set_non_default_address(),
                user.wallet_money,
                user.email,
            )
            user.wallet_money = user.wallet_money - total
            cart.cart_items = []
            await self.carts.save(cart)
            await self._commit(user, "checkout")
        logger.info(
            "Checkout completed",
            extra={"user_email": user.email, "total_cost": total},
        )

    async def _commit(self, user: UserContext, operation: str) -> None:
        # rollback expires user; its attributes cannot be read afterwards
        email = user.email
        try:
            await self.db.commit()
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(
                f"{operation} lost a concurrent write race: {e}",
                extra={"user_email": email},
            )
            raise ConflictError(
                "Cart was modified concurrently, retry the request",
                ErrorContext(user_email=email),
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"{operation} commit failed: {e}", extra={"user_email": email},
            )
            raise DatabaseError("Cart could not be persisted", operation)
