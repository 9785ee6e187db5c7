"""Boundary Protocols — contracts between the cart engine and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The ORM models satisfy these structurally; nothing inherits from them

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in store Protocols because implementations do IO
"""

from typing import Protocol


class ProductLike(Protocol):
    """Read-only product record as seen by the cart engine."""
    cost: int

    def to_snapshot(self) -> dict: ...


class UserContext(Protocol):
    """Authenticated identity carried into every cart operation."""
    email: str
    wallet_money: int
    address: str

    def has_set_non_default_address(self) -> bool: ...


class CartLike(Protocol):
    """Cart document keyed by owner email."""
    email: str
    cart_items: list
    payment_option: str


class ProductCatalog(Protocol):
    """Contract for product lookup — implemented by shell."""
    async def find_by_id(self, product_id: str) -> ProductLike | None: ...


class CartStore(Protocol):
    """Contract for cart persistence — implemented by shell."""
    async def find_by_email(self, email: str) -> CartLike | None: ...
    async def create(self, cart_data: dict) -> CartLike: ...
    async def save(self, cart: CartLike) -> CartLike: ...
