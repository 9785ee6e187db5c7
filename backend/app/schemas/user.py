"""User Schemas — public user view and address update payload."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserResponse(BaseModel):
    """Public-facing user data (never includes the password hash)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    wallet_money: int
    address: str


class AddressUpdate(BaseModel):
    address: str = Field(min_length=20, max_length=500)

    @field_validator("address")
    @classmethod
    def strip_address(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 20:
            raise ValueError("address must be at least 20 characters")
        return v


class AddressResponse(BaseModel):
    address: str
