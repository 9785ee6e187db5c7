"""Cart Schemas — cart mutation payloads and the cart document view.

Invariants:
    - productId is kept as the raw string; an unparsable id is an unknown product, not a schema error
    - Adding requires quantity >= 1
    - Updating accepts quantity >= 0; 0 means "remove the line item"
    - CartResponse.total_cost is derived from the frozen snapshots, never from live prices
"""

from pydantic import BaseModel, Field

from app.core.cart_rules import compute_total_cost


class CartItemAdd(BaseModel):
    product_id: str = Field(alias="productId", min_length=1)
    quantity: int = Field(ge=1)

    model_config = {"populate_by_name": True}


class CartItemUpdate(BaseModel):
    product_id: str = Field(alias="productId", min_length=1)
    quantity: int = Field(ge=0)

    model_config = {"populate_by_name": True}


class ProductSnapshot(BaseModel):
    id: str
    name: str
    category: str
    cost: int
    rating: int
    image: str


class CartLineItem(BaseModel):
    product: ProductSnapshot
    quantity: int


class CartResponse(BaseModel):
    email: str
    cart_items: list[CartLineItem]
    payment_option: str
    total_cost: int

    @classmethod
    def from_cart(cls, cart) -> "CartResponse":
        return cls(
            email=cart.email,
            cart_items=cart.cart_items,
            payment_option=cart.payment_option,
            total_cost=compute_total_cost(cart.cart_items),
        )
