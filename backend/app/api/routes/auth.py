"""Auth Routes — register and login, both answering {user, tokens}."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserResponse
from app.services.auth_service import (
    login_user_with_email_and_password, register_user,
)
from app.services.token_service import generate_auth_tokens

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user = await register_user(db, body.name, body.email, body.password)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        tokens=generate_auth_tokens(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await login_user_with_email_and_password(db, body.email, body.password)
    return AuthResponse(
        user=UserResponse.model_validate(user),
        tokens=generate_auth_tokens(user),
    )
