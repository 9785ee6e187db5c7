"""Cart Rules — pure line-item manipulation and checkout validation.

Invariants:
    - A cart holds at most one line item per product id
    - Line items are value copies: {"product": <snapshot dict>, "quantity": int}
    - Every mutator returns a NEW list (JSON column change detection relies on reassignment)
    - compute_total_cost is exact integer arithmetic
    - evaluate_checkout checks in a fixed order: empty cart, address, balance
    - owner (the cart's email) is carried into every error context
"""

from app.core.domain_types import Money
from app.core.errors import BadRequestError, ErrorContext

PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_CART = "Product not in cart"
# delete reports the lowercase variant; clients match on the exact string
PRODUCT_NOT_IN_CART_ON_DELETE = "product not in cart"
EMPTY_CART = "empty Cart"
ADDRESS_NOT_SET = "address not set"
INSUFFICIENT_BALANCE = "wallet balance is insufficient"


def _context(owner: str | None, product_id=None, **debug) -> ErrorContext:
    return ErrorContext(
        user_email=owner,
        product_id=str(product_id) if product_id is not None else None,
        debug_info=debug or None,
    )


def find_line_item(cart_items: list[dict], product_id: str) -> dict | None:
    """Return the line item for product_id, or None."""
    for item in cart_items:
        if str(item["product"]["id"]) == str(product_id):
            return item
    return None


def append_line_item(
    cart_items: list[dict], snapshot: dict, quantity: int, owner: str | None = None,
) -> list[dict]:
    """Add a new line item. Rejects a product that is already present."""
    if find_line_item(cart_items, snapshot["id"]) is not None:
        raise BadRequestError(
            PRODUCT_ALREADY_IN_CART, _context(owner, snapshot["id"]),
        )
    return [*cart_items, {"product": dict(snapshot), "quantity": quantity}]


def set_line_item_quantity(
    cart_items: list[dict], product_id: str, quantity: int, owner: str | None = None,
) -> list[dict]:
    """Replace the quantity of an existing line item."""
    if find_line_item(cart_items, product_id) is None:
        raise BadRequestError(PRODUCT_NOT_IN_CART, _context(owner, product_id))
    return [
        {**item, "quantity": quantity}
        if str(item["product"]["id"]) == str(product_id) else item
        for item in cart_items
    ]


def remove_line_item(
    cart_items: list[dict], product_id: str, owner: str | None = None,
) -> list[dict]:
    """Drop the line item for product_id."""
    if find_line_item(cart_items, product_id) is None:
        raise BadRequestError(
            PRODUCT_NOT_IN_CART_ON_DELETE, _context(owner, product_id),
        )
    return [
        item for item in cart_items
        if str(item["product"]["id"]) != str(product_id)
    ]


def compute_total_cost(cart_items: list[dict]) -> Money:
    return Money(sum(
        int(item["product"]["cost"]) * int(item["quantity"])
        for item in cart_items
    ))


def evaluate_checkout(
    cart_items: list[dict], address_set: bool, wallet_money: int,
    owner: str | None = None,
) -> Money:
    """Validate a checkout and return the amount to debit.

    address_set is the single authoritative "user has a real address" flag.
    """
    if not cart_items:
        raise BadRequestError(EMPTY_CART, _context(owner))
    if not address_set:
        raise BadRequestError(ADDRESS_NOT_SET, _context(owner))
    total = compute_total_cost(cart_items)
    if total > wallet_money:
        raise BadRequestError(
            INSUFFICIENT_BALANCE,
            _context(owner, total_cost=total, wallet_money=wallet_money),
        )
    return total
