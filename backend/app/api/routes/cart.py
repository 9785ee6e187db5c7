"""Cart Routes — authenticated cart operations for the current user.

Invariants:
    - Every route depends on get_current_user: auth completes before the service runs
    - PUT with quantity 0 removes the line item and answers 204
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.verify_auth import get_current_user
from app.infrastructure.database import get_db
from app.models.user import User
from app.schemas.cart import CartItemAdd, CartItemUpdate, CartResponse
from app.services.cart_service import CartService

router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    return CartService(db)


@router.get("", response_model=CartResponse)
async def get_cart(
    user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    cart = await carts.get_cart_by_user(user)
    return CartResponse.from_cart(cart)


@router.post(
    "", response_model=CartResponse, status_code=status.HTTP_201_CREATED,
)
async def add_product(
    body: CartItemAdd,
    user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    cart = await carts.add_product_to_cart(user, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@router.put("/checkout", status_code=status.HTTP_204_NO_CONTENT)
async def checkout(
    user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    await carts.checkout(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("", response_model=CartResponse)
async def update_product(
    body: CartItemUpdate,
    user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    if body.quantity == 0:
        await carts.delete_product_from_cart(user, body.product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    cart = await carts.update_product_in_cart(user, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)
