"""Auth Schemas — register/login payloads and token envelopes.

Invariants:
    - password: >= 8 chars with at least one letter and one digit, <= 72 bytes UTF-8
    - email normalized to lowercase before it reaches the service
"""

import re
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.domain_types import MAX_PASSWORD_BYTES
from app.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    @classmethod
    def password_rules(cls, v: str) -> str:
        if not re.search(r"\d", v) or not re.search(r"[a-zA-Z]", v):
            raise ValueError("password must contain at least one letter and one number")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class AccessToken(BaseModel):
    token: str
    expires: datetime


class AuthTokens(BaseModel):
    access: AccessToken


class AuthResponse(BaseModel):
    user: UserResponse
    tokens: AuthTokens
