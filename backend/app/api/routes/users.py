"""User Routes — own profile and shipping address.

Invariants:
    - A user may only read or modify their own record (403 otherwise)
"""

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.verify_auth import get_current_user
from app.core.errors import ForbiddenError
from app.infrastructure.database import get_db
from app.models.user import User
from app.schemas.user import AddressResponse, AddressUpdate, UserResponse
from app.services.user_service import set_address

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _require_self(user_id: UUID, current: User) -> None:
    if current.id != user_id:
        raise ForbiddenError()


@router.get("/{user_id}")
async def get_user(
    user_id: UUID,
    q: Literal["address"] | None = Query(None),
    current: User = Depends(get_current_user),
):
    _require_self(user_id, current)
    if q == "address":
        return AddressResponse(address=current.address)
    return UserResponse.model_validate(current)


@router.put("/{user_id}", response_model=UserResponse)
async def update_address(
    user_id: UUID,
    body: AddressUpdate,
    current: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    _require_self(user_id, current)
    user = await set_address(db, current, body.address)
    return UserResponse.model_validate(user)
